"""
Presence checks shared by the write use cases.

A value counts as missing when it is None or the empty string.
"""

from typing import Optional

from app.domain.blogging.errors import ValidationError


def require_fields(message: str, **values: Optional[str]) -> None:
    """Raise ValidationError if any of the named values is missing.

    Args:
        message: Client-facing error message.
        **values: Field name to submitted value.

    Raises:
        ValidationError: Listing every missing field, in argument order.
    """
    missing = tuple(name for name, value in values.items() if not value)
    if missing:
        raise ValidationError(message, fields=missing)
