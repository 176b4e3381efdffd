"""Validated bindings of an Ethereum node's `eth` JSON-RPC methods."""

from . import rpc_methods
from .request_manager import HTTPRequestManager, JSONRPCError, RequestManager, RPCRequest
from .rpc_methods import (
    BlockNumberType,
    call,
    client_version,
    compile_lll,
    compile_serpent,
    compile_solidity,
    estimate_gas,
    get_accounts,
    get_balance,
    get_block_by_hash,
    get_block_by_number,
    get_block_number,
    get_block_transaction_count_by_hash,
    get_block_transaction_count_by_number,
    get_chain_id,
    get_code,
    get_coinbase,
    get_compilers,
    get_fee_history,
    get_filter_changes,
    get_filter_logs,
    get_gas_price,
    get_hash_rate,
    get_logs,
    get_mining,
    get_pending_transactions,
    get_proof,
    get_protocol_version,
    get_storage_at,
    get_syncing,
    get_transaction_by_block_hash_and_index,
    get_transaction_by_block_number_and_index,
    get_transaction_by_hash,
    get_transaction_count,
    get_transaction_receipt,
    get_uncle_by_block_hash_and_index,
    get_uncle_by_block_number_and_index,
    get_uncle_count_by_block_hash,
    get_uncle_count_by_block_number,
    get_work,
    new_block_filter,
    new_filter,
    new_pending_transaction_filter,
    request_accounts,
    send_raw_transaction,
    send_transaction,
    sign,
    sign_transaction,
    submit_hashrate,
    submit_work,
    uninstall_filter,
)

__all__ = [
    "BlockNumberType",
    "HTTPRequestManager",
    "JSONRPCError",
    "RPCRequest",
    "RequestManager",
    "rpc_methods",
    *rpc_methods.__all__,
]
