"""Argument Checks — shared guards for required repository arguments."""

from chirp.core.errors import ValidationError


def require(value, field: str) -> None:
    """Raise ValidationError if a required argument is None."""
    if value is None:
        raise ValidationError(f"'{field}' cannot be None", field)
