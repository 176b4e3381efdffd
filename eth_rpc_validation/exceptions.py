"""Exceptions raised when a request parameter fails validation."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class ValidationError(ValueError):
    """
    Represent a request parameter that does not match its wire format.

    Raised before the request manager is contacted, so a caller receiving it knows the
    request never left the client.
    """

    constraint: str
    value: Any

    def __init__(self, constraint: str, value: Any):
        """Initialize the ValidationError with the violated constraint and the offending value."""
        self.constraint = constraint
        self.value = value
        super().__init__(constraint, value)

    def __str__(self) -> str:
        """Return string representation of the ValidationError."""
        return f"Invalid value {self.value!r}: expected {self.constraint}"

    @classmethod
    def from_pydantic(
        cls, constraint: str, value: Any, error: PydanticValidationError
    ) -> "ValidationError":
        """Create a ValidationError from the first error reported by a pydantic model."""
        details = error.errors()[0]
        cause = details.get("ctx", {}).get("error")
        reason = cause.constraint if isinstance(cause, ValidationError) else details["msg"]
        location = ".".join(str(part) for part in details["loc"])
        if location:
            reason = f"`{location}`: {reason}"
        return cls(f"{constraint} ({reason})", value)
