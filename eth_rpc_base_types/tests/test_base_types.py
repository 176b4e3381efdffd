"""
Test suite for `eth_rpc_base_types` module base types.
"""

from typing import Any

import pytest

from ..base_types import Address, Bytes, Hash, HeaderNonce, HexNumber
from ..json import to_json
from ..pydantic import CamelModel


@pytest.mark.parametrize(
    "a, b, equal",
    [
        (Address(1), Address(1), True),
        (Address(0), Address(1), False),
        (Address(1), "0x" + "00" * 19 + "01", True),
        (Address(1), "0x1", True),
        (Address(1), "0x2", False),
        (Address(1), 1, True),
        (Address(1), 2, False),
        (Address(1), b"\x01", True),
        (Address(1), b"\x02", False),
        ("0x1", Address(1), True),
        (1, Address(1), True),
        (2, Address(1), False),
        (Hash(0), Hash(0), True),
        (Hash(1), Hash(0), False),
        (Hash(1), "0x1", True),
        (Hash(1), 1, True),
        (b"\x01", Hash(1), True),
        (b"\x02", Hash(1), False),
    ],
)
def test_comparisons(a: Any, b: Any, equal: bool):
    """
    Test the comparison methods of the base types.
    """
    if equal:
        assert a == b
        assert not a != b
    else:
        assert a != b
        assert not a == b


def test_fixed_size_bytes_length():
    """
    Test that fixed size types reject inputs of the wrong length unless padding is requested.
    """
    with pytest.raises(ValueError, match="too small"):
        Hash("0x" + "11" * 31)
    with pytest.raises(ValueError, match="too large"):
        HeaderNonce("0x" + "11" * 9)
    assert Hash("0x" + "11" * 31, left_padding=True) == "0x00" + "11" * 31
    assert len(HeaderNonce(7)) == 8


@pytest.mark.parametrize(
    "value, expected",
    [
        (Address(0x11), "0x" + "00" * 19 + "11"),
        (Hash(1), "0x" + "00" * 31 + "01"),
        (Bytes("0xdeadbeef"), "0xdeadbeef"),
        (Bytes(), "0x"),
        (HexNumber(5), "0x5"),
        (HexNumber("0x1f"), "0x1f"),
    ],
)
def test_string_representation(value: Any, expected: str):
    """
    Test that the value types render as their wire-format hex strings.
    """
    assert str(value) == expected


def test_negative_number():
    """
    Test that quantities cannot be negative.
    """
    with pytest.raises(ValueError, match="cannot be negative"):
        HexNumber(-1)


@pytest.mark.parametrize(
    "address",
    [
        "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
        "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
        "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
        "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
    ],
)
def test_address_checksum(address: str):
    """
    Test the EIP-55 checksum of addresses against the reference vectors.
    """
    assert Address(address.lower()).checksum() == address


def test_keccak256():
    """
    Test the keccak256 digest of the empty byte string.
    """
    assert (
        Bytes(b"").keccak256()
        == "0xc5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


class SampleModel(CamelModel):
    """Model used to check the JSON encoding of nested parameters."""

    block_hash: str
    from_block: str | None = None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("latest", "latest"),
        (True, True),
        (10, 10),
        (50.5, 50.5),
        (None, None),
        ([Hash(1), "0x2"], ["0x" + "00" * 31 + "01", "0x2"]),
        (
            {"to": Address(2), "gas": HexNumber(21_000)},
            {"to": "0x" + "00" * 19 + "02", "gas": "0x5208"},
        ),
        (SampleModel(block_hash="0x01"), {"blockHash": "0x01"}),
    ],
)
def test_to_json(value: Any, expected: Any):
    """
    Test the JSON encoding of request parameters.
    """
    assert to_json(value) == expected
