"""
Validation failure types.

A failed validation is a normal outcome: the gate raises ValidationFailure,
the app-level handler turns it into a 400 envelope.

Dependencies: dataclasses (stdlib)
System role: Error taxonomy for the request validation gate
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """One failing field and its human-readable message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationFailure(Exception):
    """Raised by the gate when at least one field rule fails."""

    def __init__(self, errors: list[FieldError]) -> None:
        if not errors:
            raise ValueError("ValidationFailure requires at least one field error")
        self.errors = list(errors)
        super().__init__(", ".join(error.field for error in self.errors))
