"""
Wire-format value types of the JSON-RPC interface.

Each type is a plain `int` or `bytes` subclass whose `str()` is the hex encoding a node
expects, so instances can be passed anywhere a hex string is accepted.
"""

from typing import ClassVar, SupportsBytes, Type

from Crypto.Hash import keccak

from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    NumberConvertible,
    to_bytes,
    to_fixed_size_bytes,
    to_number,
)


class HexNumber(int):
    """
    Unsigned quantity encoded as a compact hex string on the wire (`Uint`, `Uint256`).

    `str()` returns e.g. `0x5`; leading zeros are never emitted.
    """

    def __new__(cls, input_number: NumberConvertible):
        """Create a quantity from an int, a hex or decimal string or big-endian bytes."""
        number = to_number(input_number)
        if number < 0:
            raise ValueError(f"{cls.__name__} cannot be negative: {number}")
        return super().__new__(cls, number)

    def __str__(self) -> str:
        """Return the quantity as a `0x`-prefixed hex string."""
        return hex(self)


class Bytes(bytes):
    """Byte string of any length, encoded as `0x`-prefixed hex (`HexStringBytes`)."""

    def __new__(cls, input_bytes: BytesConvertible = b""):
        """Create the byte string from a hex string or a bytes-like value."""
        if type(input_bytes) is cls:
            return input_bytes
        return super().__new__(cls, to_bytes(input_bytes))

    def __hash__(self) -> int:
        """Hash as the underlying bytes."""
        return super().__hash__()

    def __str__(self) -> str:
        """Return the `0x`-prefixed hex encoding."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the `0x`-prefixed hex encoding."""
        return "0x" + super().hex(*args, **kwargs)

    def keccak256(self) -> "Hash":
        """Return the keccak-256 digest of the bytes."""
        return Hash(keccak.new(digest_bits=256, data=bytes(self)).digest())


class FixedSizeBytes(Bytes):
    """
    Byte string of exactly `byte_length` bytes.

    Sized subclasses are created with `FixedSizeBytes[length]`. Comparisons against
    strings, ints and bytes left-pad the other operand, so `Hash(1) == "0x1"`.
    """

    byte_length: ClassVar[int]
    _sized_: ClassVar[Type["FixedSizeBytes"]]

    def __class_getitem__(cls, length: int) -> Type["FixedSizeBytes"]:
        """Return a subclass holding `length` bytes."""

        class Sized(cls):  # type: ignore
            byte_length = length

        Sized._sized_ = Sized
        return Sized

    def __new__(cls, input_bytes: FixedSizeBytesConvertible, *, left_padding: bool = False):
        """Create the value, ints are always left-padded and other inputs only on request."""
        if type(input_bytes) is cls:
            return input_bytes
        return super().__new__(
            cls, to_fixed_size_bytes(input_bytes, cls.byte_length, left_padding=left_padding)
        )

    def __hash__(self) -> int:
        """Hash as the underlying bytes."""
        return super().__hash__()

    def __eq__(self, other: object) -> bool:
        """Compare as bytes, after padding a str, int or bytes operand to the same size."""
        match other:
            case None:
                return False
            case FixedSizeBytes():
                return bytes(self) == bytes(other)
            case str() | int() | bytes() | SupportsBytes():
                try:
                    return bytes(self) == bytes(self._sized_(other, left_padding=True))
                except (ValueError, OverflowError):
                    return False
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        """Negate `__eq__`."""
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal


class Address(FixedSizeBytes[20]):  # type: ignore
    """20-byte account address."""

    def checksum(self) -> str:
        """Return the EIP-55 mixed-case encoding of the address."""
        hex_address = bytes(self).hex()
        address_hash = bytes(Bytes(hex_address.encode()).keccak256()).hex()
        return "0x" + "".join(
            char.upper() if int(nibble, 16) >= 8 else char
            for char, nibble in zip(hex_address, address_hash)
        )


class Hash(FixedSizeBytes[32]):  # type: ignore
    """32-byte value: block and transaction hashes, storage keys, topics."""


class HeaderNonce(FixedSizeBytes[8]):  # type: ignore
    """8-byte proof-of-work nonce of `eth_submitWork`."""
