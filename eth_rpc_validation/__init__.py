"""Validation of JSON-RPC request parameters before they are sent."""

from .constants import BlockTag
from .exceptions import ValidationError
from .types import AccessListEntry, Filter, TransactionCall, TransactionWithSender
from .validation import (
    validate_filter_object,
    validate_transaction_call,
    validate_transaction_with_sender,
)
from .validators import (
    validate_address,
    validate_array,
    validate_block_number_or_tag,
    validate_boolean,
    validate_hex_string_8_bytes,
    validate_hex_string_32_bytes,
    validate_hex_string_input,
    validate_numbers_input,
    validate_string_input,
)

__all__ = (
    "AccessListEntry",
    "BlockTag",
    "Filter",
    "TransactionCall",
    "TransactionWithSender",
    "ValidationError",
    "validate_address",
    "validate_array",
    "validate_block_number_or_tag",
    "validate_boolean",
    "validate_filter_object",
    "validate_hex_string_32_bytes",
    "validate_hex_string_8_bytes",
    "validate_hex_string_input",
    "validate_numbers_input",
    "validate_string_input",
    "validate_transaction_call",
    "validate_transaction_with_sender",
)
