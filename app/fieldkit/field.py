"""Field construction: label, raw field and wrapper assembly."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .constants import FieldHook
from .hooks import FIELD_FILTERS, FilterPipeline, parse_filter_string
from .resolver import FieldSpec, ValueLookup, is_empty, resolve_field_spec
from .signals import field_rendered
from .widgets import get_renderer, get_variant_hooks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedField:
    """Markup produced by one field construction."""

    label_html: str
    field_html: str
    html: str

    def __str__(self) -> str:
        return self.html

    def __html__(self) -> str:
        return self.html


def render_label(spec: FieldSpec) -> str:
    label = spec.get("label")
    if is_empty(label):
        return ""
    if spec.id:
        markup = format_html('<label for="{}">{}', spec.id, label)
    else:
        markup = format_html("<label>{}", label)
    if not is_empty(spec.get("required")):
        markup += ' <span class="field-required-indicator">*</span>'
    tooltip = spec.get("tooltip")
    if not is_empty(tooltip):
        markup += format_html(' <span class="field-tooltip-text"><i>{}</i></span>', tooltip)
    return markup + "</label>"


def wrapper_class(spec: FieldSpec) -> str:
    return " ".join(["field"] + [f"field-{key}" for key in spec.non_empty_keys()])


class Field:
    """Build the markup for a single form field.

    The field is rendered once, on construction. ``pipeline`` defaults to the
    process-wide :data:`~fieldkit.hooks.FIELD_FILTERS`; hooks needed by this
    render only are added to a derived copy and discarded afterwards.
    """

    def __init__(
        self,
        field_type: Any = "",
        args: Mapping[str, Any] | None = None,
        *,
        lookup: ValueLookup | None = None,
        pipeline: FilterPipeline | None = None,
    ):
        spec = resolve_field_spec(field_type, args, lookup=lookup)
        render_pipeline = (pipeline if pipeline is not None else FIELD_FILTERS).derive()

        declared = parse_filter_string(spec.get("add_filter"))
        if declared is not None:
            render_pipeline.add(*declared)
        for event, callback in get_variant_hooks(spec.field_type):
            render_pipeline.add(event, callback)

        self.spec = spec.replace(add_filter="")
        self.field_type = spec.field_type
        self.rendered = self._render(render_pipeline)

        logger.debug("Rendered %s field '%s'", self.field_type, self.spec.name)
        field_rendered.send(sender=Field, spec=self.spec, html=self.rendered.html)

    def __str__(self) -> str:
        return self.get_markup()

    def __html__(self) -> str:
        return self.get_markup()

    def _render(self, pipeline: FilterPipeline) -> RenderedField:
        spec, field_type = self.spec, self.field_type

        label_html = pipeline.apply(FieldHook.LABEL_HTML, render_label(spec), spec, field_type)

        raw = get_renderer(field_type)(spec, pipeline)
        field_html = pipeline.apply(FieldHook.RAW_HTML, raw, spec, field_type)

        html = format_html('<div class="{}">', wrapper_class(spec))
        html += label_html
        html += format_html('<div class="field-{}">', field_type) + field_html + "</div>"
        html += pipeline.apply(FieldHook.HTML_AFTER_WRAPPER, "", spec, field_type)
        html += "</div>"
        html = pipeline.apply(FieldHook.HTML, html, spec, field_type)

        return RenderedField(label_html=str(label_html), field_html=str(field_html), html=str(html))

    @property
    def label_html(self) -> str:
        return self.rendered.label_html

    @property
    def field_html(self) -> str:
        return self.rendered.field_html

    def get_markup(self) -> SafeString:
        return mark_safe(self.rendered.html)
