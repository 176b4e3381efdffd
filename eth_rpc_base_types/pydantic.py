"""Base pydantic classes used to define the request models."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RPCBaseModel(BaseModel):
    """Base model for all JSON-RPC request models."""

    def to_wire(self) -> Dict[str, Any]:
        """
        Return the JSON-RPC representation of the model.

        Fields are keyed by alias and unset (`None`) fields are left out.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CamelModel(RPCBaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `max_fee_per_gas` in a Python model will be represented
    as `maxFeePerGas` when it is serialized to json.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )
