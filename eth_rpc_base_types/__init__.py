"""
Common definitions and types.
"""

from .base_types import (
    Address,
    Bytes,
    FixedSizeBytes,
    Hash,
    HeaderNonce,
    HexNumber,
)
from .conversions import to_bytes, to_hex
from .json import to_json
from .pydantic import CamelModel, RPCBaseModel

__all__ = (
    "Address",
    "Bytes",
    "CamelModel",
    "FixedSizeBytes",
    "Hash",
    "HeaderNonce",
    "HexNumber",
    "RPCBaseModel",
    "to_bytes",
    "to_hex",
    "to_json",
)
