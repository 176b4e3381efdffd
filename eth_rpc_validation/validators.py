"""
Validators of the primitive wire-format types.

Every validator returns `None` for a well-formed value and raises `ValidationError`
otherwise. They never mutate or convert the value they are given.
"""

import math
from typing import Any, Callable, Type

from eth_rpc_base_types import Address, Bytes, FixedSizeBytes, Hash, HeaderNonce, HexNumber

from .constants import (
    ADDRESS_PATTERN,
    BLOCK_TAGS,
    HEX_STRING_PATTERN,
    QUANTITY_PATTERN,
    BlockTag,
)
from .exceptions import ValidationError


def validate_address(value: Any) -> None:
    """
    Validate a 20-byte `0x`-prefixed address.

    Mixed-case addresses must carry a valid EIP-55 checksum.
    """
    match value:
        case Address():
            return
        case str() if ADDRESS_PATTERN.fullmatch(value):
            digits = value[2:]
            if digits == digits.lower() or digits == digits.upper():
                return
            if Address(value).checksum() != value:
                raise ValidationError("address with a valid EIP-55 checksum", value)
        case _:
            raise ValidationError("0x-prefixed 20-byte hex address", value)


def _validate_hex_string_n_bytes(
    value: Any, byte_length: int, value_type: Type[FixedSizeBytes]
) -> None:
    if isinstance(value, value_type):
        return
    if (
        isinstance(value, str)
        and HEX_STRING_PATTERN.fullmatch(value)
        and len(value) == 2 + 2 * byte_length
    ):
        return
    raise ValidationError(f"0x-prefixed {byte_length}-byte hex string", value)


def validate_hex_string_8_bytes(value: Any) -> None:
    """Validate an 8-byte hex string such as a proof-of-work nonce."""
    _validate_hex_string_n_bytes(value, 8, HeaderNonce)


def validate_hex_string_32_bytes(value: Any) -> None:
    """Validate a 32-byte hex string such as a block or transaction hash."""
    _validate_hex_string_n_bytes(value, 32, Hash)


def validate_hex_string_input(value: Any) -> None:
    """Validate a hex string of any length, including quantities such as `0x5`."""
    if isinstance(value, (Bytes, HexNumber)):
        return
    if isinstance(value, str) and HEX_STRING_PATTERN.fullmatch(value):
        return
    raise ValidationError("0x-prefixed hex string", value)


def validate_block_number_or_tag(value: Any) -> None:
    """Validate a block number (int or hex quantity) or a block tag."""
    match value:
        case BlockTag() | HexNumber():
            return
        case bool():
            pass
        case int() if value >= 0:
            return
        case str() if value in BLOCK_TAGS or QUANTITY_PATTERN.fullmatch(value):
            return
    raise ValidationError(
        f"non-negative block number or one of the tags {', '.join(sorted(BLOCK_TAGS))}", value
    )


def validate_boolean(value: Any) -> None:
    """Validate a genuine boolean, not a truthy or falsy stand-in."""
    if not isinstance(value, bool):
        raise ValidationError("boolean", value)


def validate_string_input(value: Any) -> None:
    """Validate a string such as contract source code."""
    if not isinstance(value, str):
        raise ValidationError("string", value)


def validate_numbers_input(value: Any, *, only_integers: bool = True) -> None:
    """Validate a finite number, optionally restricted to integral values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("number", value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError("finite number", value)
        if only_integers and not value.is_integer():
            raise ValidationError("integer", value)


def validate_array(value: Any, item_validator: Callable[[Any], None], constraint: str) -> None:
    """
    Validate a list or tuple, then each of its items.

    Other iterables are rejected since they could be exhausted before being sent.
    """
    if not isinstance(value, (list, tuple)):
        raise ValidationError(constraint, value)
    for item in value:
        item_validator(item)
