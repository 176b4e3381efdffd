"""
`eth` namespace JSON-RPC methods.

Every function validates its arguments in declaration order, then hands a single
`RPCRequest` to the request manager and returns whatever `send` returned, untouched.
A `ValidationError` therefore always means the request was never sent; errors of the
request manager propagate as they are.
"""

from typing import Any, List, Mapping

from eth_rpc_base_types import Address, Bytes, Hash, HeaderNonce, HexNumber
from eth_rpc_validation import (
    BlockTag,
    Filter,
    TransactionCall,
    TransactionWithSender,
    validate_address,
    validate_array,
    validate_block_number_or_tag,
    validate_boolean,
    validate_filter_object,
    validate_hex_string_8_bytes,
    validate_hex_string_32_bytes,
    validate_hex_string_input,
    validate_numbers_input,
    validate_string_input,
    validate_transaction_call,
    validate_transaction_with_sender,
)
from pytest_plugins.logging import get_logger

from .request_manager import RequestManager, RPCRequest

logger = get_logger(__name__)

AddressType = str | Address
HexString8BytesType = str | HeaderNonce
HexString32BytesType = str | Hash
HexStringBytesType = str | Bytes
UintType = str | HexNumber
BlockNumberType = int | str | BlockTag
FilterType = Filter | Mapping[str, Any]
TransactionWithSenderType = TransactionWithSender | Mapping[str, Any]
TransactionCallType = TransactionCall | Mapping[str, Any]

__all__ = [
    "call",
    "client_version",
    "compile_lll",
    "compile_serpent",
    "compile_solidity",
    "estimate_gas",
    "get_accounts",
    "get_balance",
    "get_block_by_hash",
    "get_block_by_number",
    "get_block_number",
    "get_block_transaction_count_by_hash",
    "get_block_transaction_count_by_number",
    "get_chain_id",
    "get_code",
    "get_coinbase",
    "get_compilers",
    "get_fee_history",
    "get_filter_changes",
    "get_filter_logs",
    "get_gas_price",
    "get_hash_rate",
    "get_logs",
    "get_mining",
    "get_pending_transactions",
    "get_proof",
    "get_protocol_version",
    "get_storage_at",
    "get_syncing",
    "get_transaction_by_block_hash_and_index",
    "get_transaction_by_block_number_and_index",
    "get_transaction_by_hash",
    "get_transaction_count",
    "get_transaction_receipt",
    "get_uncle_by_block_hash_and_index",
    "get_uncle_by_block_number_and_index",
    "get_uncle_count_by_block_hash",
    "get_uncle_count_by_block_number",
    "get_work",
    "new_block_filter",
    "new_filter",
    "new_pending_transaction_filter",
    "request_accounts",
    "send_raw_transaction",
    "send_transaction",
    "sign",
    "sign_transaction",
    "submit_hashrate",
    "submit_work",
    "uninstall_filter",
]


def _send(request_manager: RequestManager, method: str, *params: Any) -> Any:
    logger.debug(f"Sending {method} with {len(params)} param(s)")
    return request_manager.send(RPCRequest(method=method, params=list(params)))


def _validate_percentile(value: Any) -> None:
    validate_numbers_input(value, only_integers=False)


def get_protocol_version(request_manager: RequestManager) -> Any:
    """`eth_protocolVersion`: Returns the current Ethereum protocol version."""
    return _send(request_manager, "eth_protocolVersion")


def get_syncing(request_manager: RequestManager) -> Any:
    """`eth_syncing`: Returns the sync status object, or `false` when not syncing."""
    return _send(request_manager, "eth_syncing")


def get_coinbase(request_manager: RequestManager) -> Any:
    """`eth_coinbase`: Returns the client coinbase address."""
    return _send(request_manager, "eth_coinbase")


def get_mining(request_manager: RequestManager) -> Any:
    """`eth_mining`: Returns whether the client is actively mining new blocks."""
    return _send(request_manager, "eth_mining")


def get_hash_rate(request_manager: RequestManager) -> Any:
    """`eth_hashrate`: Returns the number of hashes per second the node is mining with."""
    return _send(request_manager, "eth_hashrate")


def get_gas_price(request_manager: RequestManager) -> Any:
    """`eth_gasPrice`: Returns the current price per gas in wei."""
    return _send(request_manager, "eth_gasPrice")


def get_fee_history(
    request_manager: RequestManager,
    block_count: UintType,
    newest_block: BlockNumberType,
    reward_percentiles: List[int | float],
) -> Any:
    """
    `eth_feeHistory`: Returns base fees, gas used ratios and priority fee percentiles of a
    block range.

    Reward percentiles may be fractional, e.g. `[10, 50.5, 90]`.
    """
    validate_hex_string_input(block_count)
    validate_block_number_or_tag(newest_block)
    validate_array(reward_percentiles, _validate_percentile, "array of numbers")
    return _send(
        request_manager, "eth_feeHistory", block_count, newest_block, reward_percentiles
    )


def get_accounts(request_manager: RequestManager) -> Any:
    """`eth_accounts`: Returns the addresses owned by the client."""
    return _send(request_manager, "eth_accounts")


def get_block_number(request_manager: RequestManager) -> Any:
    """`eth_blockNumber`: Returns the number of the most recent block."""
    return _send(request_manager, "eth_blockNumber")


def get_balance(
    request_manager: RequestManager, address: AddressType, block_number: BlockNumberType
) -> Any:
    """`eth_getBalance`: Returns the balance of the account of given address."""
    validate_address(address)
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getBalance", address, block_number)


def get_storage_at(
    request_manager: RequestManager,
    address: AddressType,
    storage_slot: UintType,
    block_number: BlockNumberType,
) -> Any:
    """`eth_getStorageAt`: Returns the value from a storage position at a given address."""
    validate_address(address)
    validate_hex_string_input(storage_slot)
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getStorageAt", address, storage_slot, block_number)


def get_transaction_count(
    request_manager: RequestManager, address: AddressType, block_number: BlockNumberType
) -> Any:
    """`eth_getTransactionCount`: Returns the number of transactions sent from an address."""
    validate_address(address)
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getTransactionCount", address, block_number)


def get_block_transaction_count_by_hash(
    request_manager: RequestManager, block_hash: HexString32BytesType
) -> Any:
    """`eth_getBlockTransactionCountByHash`: Returns the number of transactions in a block."""
    validate_hex_string_32_bytes(block_hash)
    return _send(request_manager, "eth_getBlockTransactionCountByHash", block_hash)


def get_block_transaction_count_by_number(
    request_manager: RequestManager, block_number: BlockNumberType
) -> Any:
    """`eth_getBlockTransactionCountByNumber`: Returns the number of transactions in a block."""
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getBlockTransactionCountByNumber", block_number)


def get_uncle_count_by_block_hash(
    request_manager: RequestManager, block_hash: HexString32BytesType
) -> Any:
    """`eth_getUncleCountByBlockHash`: Returns the number of uncles in a block."""
    validate_hex_string_32_bytes(block_hash)
    return _send(request_manager, "eth_getUncleCountByBlockHash", block_hash)


def get_uncle_count_by_block_number(
    request_manager: RequestManager, block_number: BlockNumberType
) -> Any:
    """`eth_getUncleCountByBlockNumber`: Returns the number of uncles in a block."""
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getUncleCountByBlockNumber", block_number)


def get_code(
    request_manager: RequestManager, address: AddressType, block_number: BlockNumberType
) -> Any:
    """`eth_getCode`: Returns code at a given address."""
    validate_address(address)
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getCode", address, block_number)


def sign(
    request_manager: RequestManager, address: AddressType, message: HexStringBytesType
) -> Any:
    """`eth_sign`: Returns an EIP-191 signature of the message by the given account."""
    validate_address(address)
    validate_hex_string_input(message)
    return _send(request_manager, "eth_sign", address, message)


def sign_transaction(
    request_manager: RequestManager, transaction: TransactionWithSenderType
) -> Any:
    """`eth_signTransaction`: Returns an RLP encoded transaction signed by the sender."""
    validate_transaction_with_sender(transaction)
    return _send(request_manager, "eth_signTransaction", transaction)


def send_transaction(
    request_manager: RequestManager, transaction: TransactionWithSenderType
) -> Any:
    """`eth_sendTransaction`: Signs and submits a transaction."""
    validate_transaction_with_sender(transaction)
    return _send(request_manager, "eth_sendTransaction", transaction)


def send_raw_transaction(request_manager: RequestManager, transaction: HexStringBytesType) -> Any:
    """`eth_sendRawTransaction`: Submits an RLP encoded signed transaction."""
    validate_hex_string_input(transaction)
    return _send(request_manager, "eth_sendRawTransaction", transaction)


def call(
    request_manager: RequestManager,
    transaction: TransactionCallType,
    block_number: BlockNumberType,
) -> Any:
    """`eth_call`: Executes a new message call immediately without creating a transaction."""
    validate_transaction_call(transaction)
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_call", transaction, block_number)


def estimate_gas(
    request_manager: RequestManager,
    transaction: Mapping[str, Any] | TransactionWithSender,
    block_number: BlockNumberType,
) -> Any:
    """
    `eth_estimateGas`: Returns the gas needed to execute a transaction.

    The transaction may be any partial transaction object and is not validated.
    """
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_estimateGas", transaction, block_number)


def get_block_by_hash(
    request_manager: RequestManager, block_hash: HexString32BytesType, hydrated: bool
) -> Any:
    """
    `eth_getBlockByHash`: Returns information about a block by hash.

    With `hydrated` the block carries full transaction objects instead of hashes.
    """
    validate_hex_string_32_bytes(block_hash)
    validate_boolean(hydrated)
    return _send(request_manager, "eth_getBlockByHash", block_hash, hydrated)


def get_block_by_number(
    request_manager: RequestManager, block_number: BlockNumberType, hydrated: bool
) -> Any:
    """`eth_getBlockByNumber`: Returns information about a block by block number."""
    validate_block_number_or_tag(block_number)
    validate_boolean(hydrated)
    return _send(request_manager, "eth_getBlockByNumber", block_number, hydrated)


def get_transaction_by_hash(
    request_manager: RequestManager, transaction_hash: HexString32BytesType
) -> Any:
    """`eth_getTransactionByHash`: Returns transaction details."""
    validate_hex_string_32_bytes(transaction_hash)
    return _send(request_manager, "eth_getTransactionByHash", transaction_hash)


def get_pending_transactions(request_manager: RequestManager) -> Any:
    """`eth_pendingTransactions`: Returns the pending transactions of the client accounts."""
    return _send(request_manager, "eth_pendingTransactions")


def get_transaction_by_block_hash_and_index(
    request_manager: RequestManager,
    block_hash: HexString32BytesType,
    transaction_index: UintType,
) -> Any:
    """`eth_getTransactionByBlockHashAndIndex`: Returns a transaction by position in a block."""
    validate_hex_string_32_bytes(block_hash)
    validate_hex_string_input(transaction_index)
    return _send(
        request_manager, "eth_getTransactionByBlockHashAndIndex", block_hash, transaction_index
    )


def get_transaction_by_block_number_and_index(
    request_manager: RequestManager,
    block_number: BlockNumberType,
    transaction_index: UintType,
) -> Any:
    """`eth_getTransactionByBlockNumberAndIndex`: Returns a transaction by position in a block."""
    validate_block_number_or_tag(block_number)
    validate_hex_string_input(transaction_index)
    return _send(
        request_manager,
        "eth_getTransactionByBlockNumberAndIndex",
        block_number,
        transaction_index,
    )


def get_transaction_receipt(
    request_manager: RequestManager, transaction_hash: HexString32BytesType
) -> Any:
    """`eth_getTransactionReceipt`: Returns the receipt of a transaction."""
    validate_hex_string_32_bytes(transaction_hash)
    return _send(request_manager, "eth_getTransactionReceipt", transaction_hash)


def get_uncle_by_block_hash_and_index(
    request_manager: RequestManager, block_hash: HexString32BytesType, uncle_index: UintType
) -> Any:
    """`eth_getUncleByBlockHashAndIndex`: Returns an uncle by position in a block."""
    validate_hex_string_32_bytes(block_hash)
    validate_hex_string_input(uncle_index)
    return _send(request_manager, "eth_getUncleByBlockHashAndIndex", block_hash, uncle_index)


def get_uncle_by_block_number_and_index(
    request_manager: RequestManager, block_number: BlockNumberType, uncle_index: UintType
) -> Any:
    """`eth_getUncleByBlockNumberAndIndex`: Returns an uncle by position in a block."""
    validate_block_number_or_tag(block_number)
    validate_hex_string_input(uncle_index)
    return _send(
        request_manager, "eth_getUncleByBlockNumberAndIndex", block_number, uncle_index
    )


def get_compilers(request_manager: RequestManager) -> Any:
    """`eth_getCompilers`: Returns the compilers available in the client."""
    return _send(request_manager, "eth_getCompilers")


def compile_solidity(request_manager: RequestManager, code: str) -> Any:
    """`eth_compileSolidity`: Returns compiled Solidity code."""
    validate_string_input(code)
    return _send(request_manager, "eth_compileSolidity", code)


def compile_lll(request_manager: RequestManager, code: str) -> Any:
    """`eth_compileLLL`: Returns compiled LLL code."""
    validate_string_input(code)
    return _send(request_manager, "eth_compileLLL", code)


def compile_serpent(request_manager: RequestManager, code: str) -> Any:
    """`eth_compileSerpent`: Returns compiled Serpent code."""
    validate_string_input(code)
    return _send(request_manager, "eth_compileSerpent", code)


def new_filter(request_manager: RequestManager, filter_object: FilterType) -> Any:
    """`eth_newFilter`: Installs a log filter and returns its identifier."""
    validate_filter_object(filter_object)
    return _send(request_manager, "eth_newFilter", filter_object)


def new_block_filter(request_manager: RequestManager) -> Any:
    """`eth_newBlockFilter`: Installs a filter notifying about new blocks."""
    return _send(request_manager, "eth_newBlockFilter")


def new_pending_transaction_filter(request_manager: RequestManager) -> Any:
    """`eth_newPendingTransactionFilter`: Installs a filter notifying about new pending txs."""
    return _send(request_manager, "eth_newPendingTransactionFilter")


def uninstall_filter(request_manager: RequestManager, filter_identifier: UintType) -> Any:
    """`eth_uninstallFilter`: Uninstalls a filter."""
    validate_hex_string_input(filter_identifier)
    return _send(request_manager, "eth_uninstallFilter", filter_identifier)


def get_filter_changes(request_manager: RequestManager, filter_identifier: UintType) -> Any:
    """`eth_getFilterChanges`: Returns the filter matches since the last poll."""
    validate_hex_string_input(filter_identifier)
    return _send(request_manager, "eth_getFilterChanges", filter_identifier)


def get_filter_logs(request_manager: RequestManager, filter_identifier: UintType) -> Any:
    """`eth_getFilterLogs`: Returns all logs matching a log filter."""
    validate_hex_string_input(filter_identifier)
    return _send(request_manager, "eth_getFilterLogs", filter_identifier)


def get_logs(request_manager: RequestManager, filter_object: FilterType) -> Any:
    """`eth_getLogs`: Returns all logs matching a filter object."""
    validate_filter_object(filter_object)
    return _send(request_manager, "eth_getLogs", filter_object)


def get_work(request_manager: RequestManager) -> Any:
    """`eth_getWork`: Returns the current block header pow-hash, seed hash and boundary."""
    return _send(request_manager, "eth_getWork")


def submit_work(
    request_manager: RequestManager,
    nonce: HexString8BytesType,
    seed_hash: HexString32BytesType,
    difficulty: HexString32BytesType,
) -> Any:
    """`eth_submitWork`: Submits a proof-of-work solution."""
    validate_hex_string_8_bytes(nonce)
    validate_hex_string_32_bytes(seed_hash)
    validate_hex_string_32_bytes(difficulty)
    return _send(request_manager, "eth_submitWork", nonce, seed_hash, difficulty)


def submit_hashrate(
    request_manager: RequestManager,
    hash_rate: HexString32BytesType,
    identifier: HexString32BytesType,
) -> Any:
    """`eth_submitHashrate`: Submits the mining hashrate of a miner identified by `identifier`."""
    validate_hex_string_32_bytes(hash_rate)
    validate_hex_string_32_bytes(identifier)
    return _send(request_manager, "eth_submitHashrate", hash_rate, identifier)


def request_accounts(request_manager: RequestManager) -> Any:
    """`eth_requestAccounts`: Requests access to the accounts of the client."""
    return _send(request_manager, "eth_requestAccounts")


def get_chain_id(request_manager: RequestManager) -> Any:
    """`eth_chainId`: Returns the chain id used for signing replay-protected transactions."""
    return _send(request_manager, "eth_chainId")


def client_version(request_manager: RequestManager) -> Any:
    """`web3_clientVersion`: Returns the current client version."""
    return _send(request_manager, "web3_clientVersion")


def get_proof(
    request_manager: RequestManager,
    address: AddressType,
    storage_keys: List[HexString32BytesType],
    block_number: BlockNumberType,
) -> Any:
    """`eth_getProof`: Returns the account and storage values with their Merkle proofs."""
    validate_address(address)
    validate_array(storage_keys, validate_hex_string_32_bytes, "array of 32-byte hex strings")
    validate_block_number_or_tag(block_number)
    return _send(request_manager, "eth_getProof", address, storage_keys, block_number)
