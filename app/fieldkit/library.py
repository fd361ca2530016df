"""Shortcuts for rendering fields from plain argument mappings."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from django.utils.safestring import SafeString, mark_safe

from .field import Field


def render_field(field_type: Any = "", **args: Any) -> SafeString:
    return Field(field_type, args).get_markup()


def render_fields(fields: Iterable[Mapping[str, Any]]) -> SafeString:
    """Render each mapping in ``fields``; the variant is read from its ``type`` key."""

    return mark_safe("".join(Field("", field).rendered.html for field in fields))
