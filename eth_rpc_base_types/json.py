"""
JSON encoding of request parameters.
"""

from enum import Enum
from typing import Any

from .base_types import Bytes, HexNumber
from .pydantic import RPCBaseModel


def to_json(input: Any) -> Any:
    """
    Converts a request parameter to its json data representation.

    Models are dumped by alias without `None` fields, value types become their hex
    strings and enums their values. Anything else is returned untouched.
    """
    if isinstance(input, RPCBaseModel):
        return input.to_wire()
    elif isinstance(input, (list, tuple)):
        return [to_json(item) for item in input]
    elif isinstance(input, dict):
        return {key: to_json(value) for key, value in input.items()}
    elif isinstance(input, (Bytes, HexNumber)):
        return str(input)
    elif isinstance(input, Enum):
        return input.value
    return input
