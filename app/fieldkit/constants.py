"""Constants and enumerations shared by the field builder."""
from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    """Field variants with dedicated rendering behaviour."""

    TEXT = "text"
    SELECT = "select"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    MEDIA = "media"
    """Text input paired with upload and remove buttons."""

    ICON = "icon"
    """Text input paired with an icon picker."""

    VIDEO = "video"
    COLOR = "color"


#: Native input types rendered through the generic input branch.
INPUT_TYPES = frozenset(
    {
        "button",
        "date",
        "datetime-local",
        "email",
        "file",
        "hidden",
        "image",
        "month",
        "number",
        "password",
        "range",
        "reset",
        "search",
        "submit",
        "tel",
        "time",
        "url",
        "week",
    }
)

#: Legacy variant tags still accepted by ``parse_field_type``.
FIELD_TYPE_ALIASES = {
    "wp_media": FieldType.MEDIA,
    "fa_icon": FieldType.ICON,
    "wp_color": FieldType.COLOR,
}


class FieldHook(str, Enum):
    """Named extension points markup passes through while a field is built."""

    LABEL_HTML = "label_html"
    RAW_HTML = "raw_html"
    HTML_AFTER_WRAPPER = "html_after_wrapper"
    HTML = "html"
    INPUT = "input"
    TEXTAREA = "textarea"
    UPLOAD_BTN = "upload_btn"
    REMOVE_BTN = "remove_btn"
    MEDIA_HTML = "media_html"
    ICON_INSERT_BTN = "icon_insert_btn"
    ICON_REMOVE_BTN = "icon_remove_btn"
    ICON_HTML = "icon_html"


#: Arguments understood by every field, in the order they are merged.
DEFAULT_ARGS: tuple[tuple[str, object], ...] = (
    ("label", ""),
    ("tooltip", ""),
    ("add_filter", ""),
    ("context", ""),
    ("name", ""),
    ("id", ""),
    ("value", ""),
    ("value_att", ""),
    ("default", ""),
    ("options", ()),
    ("attribute", ""),
)

#: Arguments that alter markup and are never emitted as HTML attributes.
RESERVED_KEYS = frozenset(
    {
        "label",
        "tooltip",
        "add_filter",
        "template",
        "default",
        "options",
        "value_att",
        "attribute",
        "context",
    }
)

#: Flags accepting any truthy value and rendered as ``flag="flag"``.
BOOLEAN_FLAGS: tuple[str, ...] = ("required", "multiple", "disabled")

#: Value compared against the stored value when a checkbox omits ``value_att``.
DEFAULT_CHECKED_VALUE = "1"

BTN_UPLOAD_FILE = (
    '<a class="field-btn-upload" href="javascript:void(0);" '
    'onclick="FieldKit.Media.init(this)"><i class="fa fa-fw fa-upload"></i></a>'
)
BTN_REMOVE_FILE = (
    '<a class="field-btn-remove" href="javascript:void(0);" '
    'onclick="FieldKit.Media.remove(this)"><i class="fa fa-fw fa-times"></i></a>'
)
BTN_INSERT_ICON = (
    '<a href="javascript:void(0);" class="field-choose-icon">'
    '<i class="fa fa-fw fa-th"></i></a>'
)
BTN_REMOVE_ICON = (
    '<a href="javascript:void(0);" class="field-remove-icon">'
    '<i class="fa fa-fw fa-times"></i></a>'
)
