"""Django form widget backed by the field builder."""
from __future__ import annotations

from typing import Any, Mapping

from django import forms
from django.utils.safestring import mark_safe

from .constants import DEFAULT_CHECKED_VALUE
from .field import Field
from .hooks import FilterPipeline


def _no_stored_value(name: str, context: str) -> None:
    return None


class FieldkitWidget(forms.Widget):
    """Render a form field through the CMS field markup and filters.

    Bound form data is authoritative, so stored options are never consulted.
    """

    def __init__(
        self,
        field_type: str = "text",
        attrs: Mapping[str, Any] | None = None,
        field_args: Mapping[str, Any] | None = None,
        pipeline: FilterPipeline | None = None,
    ):
        super().__init__(attrs)
        self.field_type = field_type
        self.field_args = dict(field_args or {})
        self.pipeline = pipeline

    def field_arguments(self, name: str, value: Any, attrs: Mapping[str, Any] | None = None) -> dict:
        args: dict[str, Any] = dict(self.field_args)
        args.update(self.build_attrs(self.attrs, attrs))
        args["name"] = name
        if value is True:
            value = self.field_args.get("value_att") or DEFAULT_CHECKED_VALUE
        elif value is False:
            value = None
        if value is not None:
            args["value"] = value
        if self.is_required:
            args["required"] = True
        return args

    def build_field(self, name: str, value: Any, attrs: Mapping[str, Any] | None = None) -> Field:
        return Field(
            self.field_type,
            self.field_arguments(name, value, attrs),
            lookup=_no_stored_value,
            pipeline=self.pipeline,
        )

    def render(self, name, value, attrs=None, renderer=None):
        return mark_safe(self.build_field(name, value, attrs).rendered.html)

    def value_from_datadict(self, data, files, name):
        if self.field_args.get("multiple") and hasattr(data, "getlist"):
            return data.getlist(f"{name}[]") or data.getlist(name)
        return data.get(name)
