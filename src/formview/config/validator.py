"""Validation utilities for formview configuration."""

from pydantic import ValidationError as PydanticValidationError

VALUE_ERROR_PREFIX = "Value error, "


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(item) for item in loc) if loc else "unknown"


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten Pydantic ValidationError into human-readable messages.

    Pydantic's "Value error, " prefix is stripped so messages raised by our
    own field validators read naturally.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of messages, one per field error
    """
    errors: list[str] = []

    for error in exc.errors():
        msg = error.get("msg", "Unknown error").replace(VALUE_ERROR_PREFIX, "")
        if error.get("type") == "extra_forbidden":
            msg = "Unknown option"
        errors.append(f"Field '{_field_path(error.get('loc', ()))}': {msg}")

    return errors if errors else ["Validation failed with unknown error"]


def first_error_field(exc: PydanticValidationError) -> str:
    """Return the dotted path of the first failing field."""
    errors = exc.errors()
    if not errors:
        return "unknown"
    return _field_path(errors[0].get("loc", ()))
