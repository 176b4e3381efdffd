"""Validators of the structured request parameters."""

from typing import Any, Mapping, Type

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .types import Filter, RequestModel, TransactionCall, TransactionWithSender


def _validate_model(model: Type[RequestModel], value: Any, constraint: str) -> None:
    """
    Run the model validation over a mapping or a model instance.

    Mappings are sent to the node as they are, so their keys must be the wire names
    (`gasPrice`, never `gas_price`). Model instances are validated again since they may
    have been mutated after construction.
    """
    if not isinstance(value, (model, Mapping)):
        raise ValidationError(constraint, value)
    try:
        if isinstance(value, model):
            model.model_validate(value)
        else:
            model.model_validate(value, by_alias=True, by_name=False)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(constraint, value, e) from e


def validate_filter_object(value: Any) -> None:
    """Validate a log filter."""
    _validate_model(Filter, value, "filter object")


def validate_transaction_with_sender(value: Any) -> None:
    """Validate an unsigned transaction carrying its sender."""
    _validate_model(TransactionWithSender, value, "transaction with sender")


def validate_transaction_call(value: Any) -> None:
    """Validate a transaction to simulate with `eth_call`."""
    _validate_model(TransactionCall, value, "transaction call")
