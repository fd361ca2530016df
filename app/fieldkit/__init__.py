"""Public interface for CMS form field rendering."""
from .constants import FieldHook, FieldType
from .exceptions import InvalidFieldSpec
from .field import Field, RenderedField
from .hooks import FIELD_FILTERS, FilterPipeline, register_field_filter
from .library import render_field, render_fields
from .resolver import FieldSpec, resolve_field_spec
from .signals import field_rendered

__all__ = [
    "Field",
    "FieldHook",
    "FieldSpec",
    "FieldType",
    "FIELD_FILTERS",
    "FilterPipeline",
    "InvalidFieldSpec",
    "RenderedField",
    "field_rendered",
    "register_field_filter",
    "render_field",
    "render_fields",
    "resolve_field_spec",
]
