"""Template tags rendering CMS form fields."""
from __future__ import annotations

from typing import Any

from django import template
from django.utils.safestring import mark_safe

from fieldkit.field import Field

register = template.Library()


@register.simple_tag
def render_field(field_type: str = "", **args: Any) -> str:
    """Render a field, e.g. ``{% render_field "select" name="size" options=sizes %}``."""

    return mark_safe(Field(field_type, args).rendered.html)


@register.simple_tag
def render_field_label(field_type: str = "", **args: Any) -> str:
    """Render only the (filtered) label of a field."""

    return mark_safe(Field(field_type, args).label_html)
