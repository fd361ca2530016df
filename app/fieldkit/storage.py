"""Lookup of stored field values.

Values are stored per ``(context, name)`` in :class:`fieldkit.models.FieldOption`
unless ``FIELDKIT_VALUE_LOOKUPS`` maps a context to another backend. Array
style names such as ``opts[color]`` read the ``opts`` option and walk into
the stored mapping.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

_KEY_SEGMENT = re.compile(r"\[([^\]]*)\]")


def split_name(name: str) -> list[str]:
    """Return the option name followed by the nested keys of ``name``."""

    name = str(name or "")
    root = name.split("[", 1)[0]
    if not root:
        return []
    return [root] + [key for key in _KEY_SEGMENT.findall(name) if key]


def option_lookup(name: str, context: str = "") -> Any:
    """Default backend reading :class:`FieldOption` rows."""

    from .models import FieldOption

    option = FieldOption.objects.filter(context=context, name=name).first()
    return option.value if option is not None else None


def get_lookup(context: str = "") -> Callable[[str, str], Any]:
    """Return the backend configured for ``context``."""

    configured = getattr(settings, "FIELDKIT_VALUE_LOOKUPS", None) or {}
    path = configured.get(context)
    if not path:
        return option_lookup
    if callable(path):
        return path
    try:
        return import_string(path)
    except ImportError:
        logger.warning(
            "Cannot import FIELDKIT_VALUE_LOOKUPS entry %r for context '%s'; using stored options",
            path,
            context,
            exc_info=True,
        )
        return option_lookup


def _walk(value: Any, keys: list[str]) -> Any:
    for key in keys:
        if isinstance(value, Mapping):
            value = value.get(key)
        elif isinstance(value, (list, tuple)) and key.isdigit() and int(key) < len(value):
            value = value[int(key)]
        else:
            return None
        if value is None:
            return None
    return value


def get_value(name: str, context: str = "") -> Any:
    """Return the stored value for ``name`` or ``None`` when nothing is stored."""

    keys = split_name(name)
    if not keys:
        return None
    root, path = keys[0], keys[1:]
    value = get_lookup(context)(root, context)
    if value is None:
        logger.debug("Option '%s' not found in context '%s'", root, context)
        return None
    return _walk(value, path)


def set_value(name: str, value: Any, context: str = "") -> None:
    """Store ``value`` for ``name``, nesting it for array style names."""

    from .models import FieldOption

    keys = split_name(name)
    if not keys:
        raise ValueError("Cannot store a value without a name.")
    root, path = keys[0], keys[1:]

    option, _ = FieldOption.objects.get_or_create(context=context, name=root)
    if not path:
        option.value = value
    else:
        data = option.value if isinstance(option.value, dict) else {}
        node = data
        for key in path[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[path[-1]] = value
        option.value = data
    option.save()
