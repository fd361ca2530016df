"""Argument resolution for field construction.

``resolve_field_spec`` merges caller arguments with the field defaults and
derives the ``name``, ``id`` and ``value`` attributes through their fallback
chains. The caller's mapping is never mutated; the result is an immutable
:class:`FieldSpec`.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from .constants import (
    BOOLEAN_FLAGS,
    DEFAULT_ARGS,
    DEFAULT_CHECKED_VALUE,
    FIELD_TYPE_ALIASES,
    INPUT_TYPES,
    FieldType,
)
from .exceptions import InvalidFieldSpec

logger = logging.getLogger(__name__)

ValueLookup = Callable[[str, str], Any]

_INVALID_NAME_CHARS = re.compile(r"[^-_a-z0-9]")
_FIELD_TYPE_VALUES = frozenset(member.value for member in FieldType)


def is_empty(value: Any) -> bool:
    """Return ``True`` for values that should be treated as not supplied."""

    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def parse_field_type(field_type: Any) -> str:
    """Normalise a variant tag, raising ``InvalidFieldSpec`` for unknown tags."""

    if isinstance(field_type, FieldType):
        return field_type.value
    tag = str(field_type or "").strip().lower()
    if not tag:
        return FieldType.TEXT.value
    if tag in FIELD_TYPE_ALIASES:
        return FIELD_TYPE_ALIASES[tag].value
    if tag in _FIELD_TYPE_VALUES or tag in INPUT_TYPES:
        return tag
    raise InvalidFieldSpec(f"Unknown field type '{field_type}'.")


@dataclass(frozen=True)
class FieldSpec:
    """Resolved, normalised attribute set for one field instance."""

    field_type: str
    attrs: Mapping[str, Any]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.attrs, MappingProxyType):
            object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))

    def __getitem__(self, key: str) -> Any:
        return self.attrs[key]

    def __contains__(self, key: object) -> bool:
        return key in self.attrs

    def __iter__(self) -> Iterator[str]:
        return iter(self.attrs)

    def get(self, key: str, default: Any = None) -> Any:
        return self.attrs.get(key, default)

    def items(self):
        return self.attrs.items()

    @property
    def name(self) -> str:
        return self.attrs.get("name", "")

    @property
    def id(self) -> str:
        return self.attrs.get("id", "")

    @property
    def value(self) -> Any:
        return self.attrs.get("value", "")

    def non_empty_keys(self) -> list[str]:
        return [key for key, value in self.attrs.items() if not is_empty(value)]

    def replace(self, **changes: Any) -> "FieldSpec":
        """Return a copy with ``changes`` applied to the attributes."""

        attrs = dict(self.attrs)
        attrs.update(changes)
        return FieldSpec(self.field_type, attrs)


def name_from_id(id_att: str) -> str:
    """Derive a ``name`` attribute from an ``id`` by stripping invalid characters."""

    return _INVALID_NAME_CHARS.sub("", str(id_att).lower())


def id_from_name(name: str) -> str:
    """Derive an ``id`` from a name, turning ``foo[bar]`` into ``foo-bar``."""

    name = str(name)
    if "[" not in name and "]" not in name:
        return name
    return name.replace("[", "-").replace("]", "").rstrip("-")


def resolve_name(args: Mapping[str, Any]) -> str:
    name = ""
    if not is_empty(args.get("name")):
        name = str(args["name"])
    elif not is_empty(args.get("id")):
        name = name_from_id(args["id"])

    if name and args.get("multiple") and not name.endswith("[]"):
        name = f"{name}[]"
    return name


def resolve_id(args: Mapping[str, Any], name: str) -> str:
    if not is_empty(args.get("id")):
        return str(args["id"])
    if name:
        return id_from_name(name)
    return ""


def resolve_value(args: Mapping[str, Any], name: str, lookup: ValueLookup | None = None) -> Any:
    """Return the explicit value, the stored value, the default or ``""``."""

    if not is_empty(args.get("value")):
        return args["value"]
    if not name:
        return ""

    if lookup is None:
        from .storage import get_value as lookup

    context = args.get("context") or ""
    stored = lookup(name, context)
    if not is_empty(stored):
        return stored

    logger.debug("No stored value for field '%s' (context '%s')", name, context)
    default = args.get("default")
    return default if not is_empty(default) else ""


def resolve_field_spec(
    field_type: Any,
    args: Mapping[str, Any] | None = None,
    *,
    lookup: ValueLookup | None = None,
) -> FieldSpec:
    """Merge ``args`` with the defaults and derive the field attributes."""

    args = dict(args or {})
    declared_type = args.pop("type", None)
    if is_empty(field_type) and not is_empty(declared_type):
        field_type = declared_type
    field_type = parse_field_type(field_type)

    attrs: dict[str, Any] = dict(DEFAULT_ARGS)
    attrs.update(args)

    name = resolve_name(args)
    attrs["name"] = name
    attrs["value"] = resolve_value(args, name, lookup)
    attrs["id"] = resolve_id(args, name)

    for flag in BOOLEAN_FLAGS:
        attrs[flag] = flag if args.get(flag) else ""

    if field_type in (FieldType.CHECKBOX.value, FieldType.RADIO.value) and is_empty(
        attrs.get("value_att")
    ):
        attrs["value_att"] = DEFAULT_CHECKED_VALUE

    return FieldSpec(field_type, attrs)
