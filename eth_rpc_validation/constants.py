"""Constants of the JSON-RPC wire formats."""

import re
from enum import Enum


class BlockTag(str, Enum):
    """Symbolic pointers to well-known chain positions."""

    EARLIEST = "earliest"
    LATEST = "latest"
    PENDING = "pending"
    SAFE = "safe"
    FINALIZED = "finalized"


BLOCK_TAGS = frozenset(tag.value for tag in BlockTag)

HEX_STRING_PATTERN = re.compile(r"0x[0-9a-fA-F]*")
QUANTITY_PATTERN = re.compile(r"0x[0-9a-fA-F]+")
ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")
