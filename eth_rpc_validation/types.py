"""Structured request parameters: log filters and transaction objects."""

from typing import Annotated, Any, Callable, List, Self

from pydantic import (
    AfterValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)

from eth_rpc_base_types import CamelModel, to_json

from .validators import (
    validate_address,
    validate_block_number_or_tag,
    validate_hex_string_32_bytes,
    validate_hex_string_input,
)


def _checked_by(validator: Callable[[Any], None]) -> AfterValidator:
    """Turn a wire-format validator into a pydantic validator that keeps the value untouched."""

    def check(value: Any) -> Any:
        validator(value)
        return value

    return AfterValidator(check)


WireSerializer = PlainSerializer(to_json, when_used="json")

AddressField = Annotated[Any, _checked_by(validate_address), WireSerializer]
Hash32Field = Annotated[Any, _checked_by(validate_hex_string_32_bytes), WireSerializer]
HexField = Annotated[Any, _checked_by(validate_hex_string_input), WireSerializer]
BlockNumberOrTagField = Annotated[Any, _checked_by(validate_block_number_or_tag), WireSerializer]


class RequestModel(CamelModel):
    """Base of the structured parameters; instances are validated again whenever checked."""

    model_config = ConfigDict(revalidate_instances="always")


class Filter(RequestModel):
    """Log filter of `eth_newFilter` and `eth_getLogs`."""

    model_config = ConfigDict(extra="forbid")

    from_block: BlockNumberOrTagField | None = None
    to_block: BlockNumberOrTagField | None = None
    address: Annotated[Any, WireSerializer] = None
    topics: Annotated[List[Any] | None, WireSerializer] = None
    block_hash: Hash32Field | None = None

    @field_validator("address")
    @classmethod
    def check_address(cls, address: Any) -> Any:
        """Accept a single address or a list of addresses."""
        if isinstance(address, list):
            for item in address:
                validate_address(item)
        elif address is not None:
            validate_address(address)
        return address

    @field_validator("topics")
    @classmethod
    def check_topics(cls, topics: List[Any] | None) -> List[Any] | None:
        """
        Check every topic position.

        A position is either a wildcard (`None`), a single 32-byte topic or a list of
        alternative 32-byte topics.
        """
        for topic in topics or []:
            if topic is None:
                continue
            if isinstance(topic, list):
                for alternative in topic:
                    validate_hex_string_32_bytes(alternative)
            else:
                validate_hex_string_32_bytes(topic)
        return topics


class AccessListEntry(RequestModel):
    """Address and storage keys pre-declared by an EIP-2930 access list."""

    model_config = ConfigDict(extra="forbid")

    address: AddressField
    storage_keys: List[Hash32Field]


class TransactionWithSender(RequestModel):
    """
    Unsigned transaction of `eth_sendTransaction` and `eth_signTransaction`.

    The fee fields select the transaction shape: `gasPrice` alone is a legacy transaction,
    `gasPrice` with `accessList` an EIP-2930 transaction, and `maxFeePerGas` with
    `maxPriorityFeePerGas` an EIP-1559 transaction.
    """

    sender: AddressField = Field(..., alias="from")
    to: AddressField | None = None
    type_: HexField | None = Field(None, alias="type")
    nonce: HexField
    gas: HexField
    value: HexField
    input: HexField
    chain_id: HexField | None = None
    gas_price: HexField | None = None
    max_fee_per_gas: HexField | None = None
    max_priority_fee_per_gas: HexField | None = None
    access_list: List[AccessListEntry] | None = None

    @model_validator(mode="after")
    def check_fee_fields(self) -> Self:
        """Check that exactly one fee shape is present."""
        fee_market = (self.max_fee_per_gas, self.max_priority_fee_per_gas)
        match (self.gas_price is not None, any(fee is not None for fee in fee_market)):
            case (True, True):
                raise ValueError(
                    "`gasPrice` cannot be combined with `maxFeePerGas` or `maxPriorityFeePerGas`"
                )
            case (False, False):
                raise ValueError(
                    "either `gasPrice` or `maxFeePerGas` and `maxPriorityFeePerGas` is required"
                )
            case (False, True) if any(fee is None for fee in fee_market):
                raise ValueError("`maxFeePerGas` and `maxPriorityFeePerGas` are both required")
        return self


class TransactionCall(RequestModel):
    """Transaction simulated by `eth_call`; every field but `to` may be omitted."""

    sender: AddressField | None = Field(None, alias="from")
    to: AddressField
    gas: HexField | None = None
    gas_price: HexField | None = None
    max_fee_per_gas: HexField | None = None
    max_priority_fee_per_gas: HexField | None = None
    value: HexField | None = None
    data: HexField | None = None
    input: HexField | None = None
