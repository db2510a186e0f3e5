from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_fields(data: Mapping[str, Any], fields: tuple[str, ...], message: str) -> dict[str, str]:
    """Return the named fields stripped, or raise ValidationError if any is blank."""
    return {name: require_non_empty(data.get(name), message) for name in fields}
