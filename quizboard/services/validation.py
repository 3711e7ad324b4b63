"""Input coercion shared by the submission and authoring paths."""

from __future__ import annotations

from typing import Any, Dict

from ..core.errors import ValidationError


def require_mapping(value: Any) -> Dict[str, Any]:
    """Return a request body as a dict; anything else counts as missing fields."""

    if not isinstance(value, dict):
        raise ValidationError()
    return value


def require_text(value: Any, *, strip: bool = True) -> str:
    """Return ``value`` as a non-empty string or raise ``ValidationError``.

    Identifiers are stripped; answers are passed with ``strip=False`` so they
    are stored and compared exactly as submitted.
    """

    if not isinstance(value, str):
        raise ValidationError()
    checked = value.strip() if strip else value
    if not checked:
        raise ValidationError()
    return checked


def coerce_week(value: Any) -> int:
    """Accept a positive integer week given as a number or a digit string.

    Whole-valued floats such as ``1.0`` are the same week as ``1``.
    """

    if isinstance(value, bool):
        raise ValidationError()
    if isinstance(value, int):
        week = value
    elif isinstance(value, float) and value.is_integer():
        week = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        week = int(value.strip())
    else:
        raise ValidationError()
    if week < 1:
        raise ValidationError()
    return week


__all__ = ["coerce_week", "require_mapping", "require_text"]
