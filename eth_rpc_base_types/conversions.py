"""Conversions between Python values and the hex encodings used on the wire."""

from typing import SupportsBytes, TypeAlias

BytesConvertible: TypeAlias = str | bytes | SupportsBytes
FixedSizeBytesConvertible: TypeAlias = str | bytes | SupportsBytes | int
NumberConvertible: TypeAlias = str | bytes | SupportsBytes | int


def strip_hex_prefix(value: str) -> str:
    """Return the hex digits of a string, without its `0x` prefix if present."""
    return value[2:] if value[:2] in ("0x", "0X") else value


def to_bytes(input_bytes: BytesConvertible) -> bytes:
    """
    Convert a hex string or bytes-like value into bytes.

    Hex strings of odd length are read as quantities, i.e. `0x5` is `b"\\x05"`.
    """
    match input_bytes:
        case None:
            raise TypeError("Cannot convert `None` input to bytes")
        case bytes() | SupportsBytes():
            return bytes(input_bytes)
        case str():
            digits = strip_hex_prefix(input_bytes)
            return bytes.fromhex(digits.rjust(len(digits) + len(digits) % 2, "0"))
    raise TypeError(f"invalid type for `bytes`: {type(input_bytes).__name__}")


def to_fixed_size_bytes(
    input_bytes: FixedSizeBytesConvertible,
    size: int,
    *,
    left_padding: bool = False,
) -> bytes:
    """
    Convert a value into exactly `size` bytes.

    :param input_bytes: The input data to convert.
    :param size: The size of the output bytes.
    :param left_padding: Whether shorter inputs may be zero-padded on the left. Integers are
        always padded.
    """
    if isinstance(input_bytes, int):
        return input_bytes.to_bytes(size, byteorder="big")
    data = to_bytes(input_bytes)
    if len(data) > size:
        raise ValueError(f"input is too large for {size} bytes: {len(data)} > {size}")
    if len(data) < size and not left_padding:
        raise ValueError(
            f"input is too small for {size} bytes: {len(data)} < {size}, "
            "use `left_padding=True` to allow padding"
        )
    return data.rjust(size, b"\x00")


def to_hex(input_bytes: BytesConvertible) -> str:
    """Convert a bytes-like value into its `0x`-prefixed hex string."""
    return "0x" + to_bytes(input_bytes).hex()


def to_number(input_number: NumberConvertible) -> int:
    """Convert a hex or decimal string, big-endian bytes or an int into an int."""
    match input_number:
        case bool():
            raise TypeError("invalid type for `number`: bool")
        case int():
            return input_number
        case str():
            return int(input_number, 0)
        case bytes() | SupportsBytes():
            return int.from_bytes(bytes(input_number), byteorder="big")
    raise TypeError(f"invalid type for `number`: {type(input_number).__name__}")
