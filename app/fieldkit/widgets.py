"""Raw markup for each field variant."""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Tuple

from django.utils.html import escape, format_html

from .constants import (
    BTN_INSERT_ICON,
    BTN_REMOVE_FILE,
    BTN_REMOVE_ICON,
    BTN_UPLOAD_FILE,
    RESERVED_KEYS,
    FieldHook,
    FieldType,
)
from .hooks import FilterPipeline, HookCallback, silent_label
from .icons import render_icon_catalog
from .resolver import FieldSpec, is_empty

Renderer = Callable[[FieldSpec, FilterPipeline], str]

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _merge_classes(existing: str | None, new: str | None) -> str | None:
    classes = []
    if existing:
        classes.append(existing)
    if new:
        classes.append(new)
    if not classes:
        return None
    # Collapse whitespace and deduplicate while preserving order.
    seen = set()
    ordered = []
    for chunk in " ".join(classes).split():
        if chunk not in seen:
            seen.add(chunk)
            ordered.append(chunk)
    return " ".join(ordered)


def _with_class(spec: FieldSpec, css_class: str) -> FieldSpec:
    return spec.replace(**{"class": _merge_classes(spec.get("class") or None, css_class)})


def _stringify(key: str, value: Any) -> str:
    if value is True:
        return key
    if isinstance(value, _SEQUENCE_TYPES):
        return ",".join(str(item) for item in value)
    return str(value)


def build_attrs(spec: FieldSpec, exclude: Iterable[str] = ()) -> str:
    """Render every non-empty, non-reserved attribute as ``key="value"``."""

    excluded = set(exclude)
    parts = []
    raw = spec.get("attribute")
    if not is_empty(raw):
        parts.append(f" {raw}")
    for key, value in spec.items():
        if key in RESERVED_KEYS or key in excluded or is_empty(value):
            continue
        parts.append(format_html(' {}="{}"', key, _stringify(key, value)))
    return "".join(parts)


def _option_pairs(options: Any) -> Iterable[Tuple[Any, Any]]:
    if is_empty(options):
        return ()
    if hasattr(options, "items"):
        return options.items()
    pairs = []
    for option in options:
        if isinstance(option, (list, tuple)) and len(option) == 2:
            pairs.append((option[0], option[1]))
        else:
            pairs.append((option, option))
    return pairs


def is_selected(option_value: Any, value: Any) -> bool:
    if isinstance(value, _SEQUENCE_TYPES):
        return str(option_value) in {str(item) for item in value}
    return str(option_value) == str(value)


def render_options(spec: FieldSpec) -> str:
    parts = []
    for label, option_value in _option_pairs(spec.get("options")):
        selected = ' selected="selected"' if is_selected(option_value, spec.value) else ""
        parts.append(
            format_html('<option value="{}"{}>{}</option>', option_value, selected, label)
        )
    return "".join(parts)


def render_input(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    markup = format_html('<input type="{}"', spec.field_type) + build_attrs(spec) + ">"
    return pipeline.apply(FieldHook.INPUT, markup, spec, spec.field_type)


def render_select(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    return "<select" + build_attrs(spec, exclude=("value",)) + ">" + render_options(spec) + "</select>"


def render_textarea(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    content = escape(_stringify("value", spec.value)) if not is_empty(spec.value) else ""
    markup = "<textarea" + build_attrs(spec, exclude=("value",)) + ">" + content + "</textarea>"
    return pipeline.apply(FieldHook.TEXTAREA, markup, spec, spec.field_type)


def is_checked(spec: FieldSpec) -> bool:
    value_att, value = spec.get("value_att"), spec.value
    if is_empty(value_att) or is_empty(value):
        return False
    return is_selected(value_att, value)


def render_toggle(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    """Checkbox and radio inputs followed by their state indicator."""

    markup = format_html('<input type="{}" value="{}"', spec.field_type, spec.get("value_att"))
    if is_checked(spec):
        markup += ' checked="checked"'
    markup += build_attrs(spec, exclude=("value",))
    markup += format_html('><label for="{}" class="field-state"></label>', spec.id)
    return markup


def render_media(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    field_type = spec.field_type
    markup = render_input(_with_class(spec, "field-file-url"), pipeline)
    markup += pipeline.apply(FieldHook.UPLOAD_BTN, BTN_UPLOAD_FILE, spec, field_type)
    markup += pipeline.apply(FieldHook.REMOVE_BTN, BTN_REMOVE_FILE, spec, field_type)
    return pipeline.apply(FieldHook.MEDIA_HTML, markup, spec, field_type)


def render_icon(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    field_type = spec.field_type
    markup = render_input(_with_class(spec, "field-icon-input"), pipeline)
    markup += pipeline.apply(FieldHook.ICON_INSERT_BTN, BTN_INSERT_ICON, spec, field_type)
    markup += pipeline.apply(FieldHook.ICON_REMOVE_BTN, BTN_REMOVE_ICON, spec, field_type)
    return pipeline.apply(FieldHook.ICON_HTML, markup, spec, field_type)


def render_color(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    return render_input(_with_class(spec, "field-color-input"), pipeline)


def render_video(spec: FieldSpec, pipeline: FilterPipeline) -> str:
    return render_textarea(_with_class(spec, "field-video-input"), pipeline)


def _text_input_for(variant: FieldType, extra: str = "") -> HookCallback:
    source = f'type="{variant.value}"'
    replacement = f'type="text"{extra}'

    def rewrite(markup: str, spec: Any = None, field_type: str = "") -> str:
        return markup.replace(source, replacement, 1)

    rewrite.__name__ = f"{variant.value}_input"
    return rewrite


media_input = _text_input_for(FieldType.MEDIA)
icon_input = _text_input_for(FieldType.ICON)
color_input = _text_input_for(FieldType.COLOR, ' data-type="color"')


def video_textarea(markup: str, spec: Any = None, field_type: str = "") -> str:
    return markup.replace("<textarea", '<textarea data-type="video"', 1)


RENDERERS: Dict[FieldType, Renderer] = {
    FieldType.TEXT: render_input,
    FieldType.SELECT: render_select,
    FieldType.TEXTAREA: render_textarea,
    FieldType.CHECKBOX: render_toggle,
    FieldType.RADIO: render_toggle,
    FieldType.MEDIA: render_media,
    FieldType.ICON: render_icon,
    FieldType.VIDEO: render_video,
    FieldType.COLOR: render_color,
}

#: Filters a variant adds to its own render only.
VARIANT_HOOKS: Dict[FieldType, Tuple[Tuple[FieldHook, HookCallback], ...]] = {
    FieldType.CHECKBOX: ((FieldHook.LABEL_HTML, silent_label),),
    FieldType.RADIO: ((FieldHook.LABEL_HTML, silent_label),),
    FieldType.MEDIA: ((FieldHook.INPUT, media_input),),
    FieldType.ICON: (
        (FieldHook.INPUT, icon_input),
        (FieldHook.HTML_AFTER_WRAPPER, render_icon_catalog),
    ),
    FieldType.COLOR: ((FieldHook.INPUT, color_input),),
    FieldType.VIDEO: ((FieldHook.TEXTAREA, video_textarea),),
}

_VARIANTS = {member.value: member for member in FieldType}


def get_renderer(field_type: str) -> Renderer:
    """Return the renderer for ``field_type``; native input types share ``render_input``."""

    variant = _VARIANTS.get(field_type)
    if variant is None:
        return render_input
    return RENDERERS[variant]


def get_variant_hooks(field_type: str) -> Tuple[Tuple[FieldHook, HookCallback], ...]:
    variant = _VARIANTS.get(field_type)
    if variant is None:
        return ()
    return VARIANT_HOOKS.get(variant, ())
