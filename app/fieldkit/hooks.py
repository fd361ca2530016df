"""Named filter hooks applied to markup while a field is built.

A :class:`FilterPipeline` maps an event name to an ordered list of callbacks.
Each callback receives ``(markup, spec, field_type)`` and returns replacement
markup. Hooks needed by a single render are added to a pipeline derived from
:data:`FIELD_FILTERS`, so they never outlive that render.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple

from django.conf import settings
from django.utils.module_loading import import_string

from .constants import FieldHook
from .exceptions import InvalidFieldSpec

logger = logging.getLogger(__name__)

HookCallback = Callable[[str, Any, str], str]


def _event_name(event: FieldHook | str) -> str:
    if isinstance(event, FieldHook):
        return event.value
    return str(event)


class FilterPipeline:
    """Ordered collection of markup filters keyed by event name."""

    def __init__(self, hooks: Mapping[str, Iterable[HookCallback]] | None = None):
        self._hooks: Dict[str, List[HookCallback]] = {}
        for event, callbacks in (hooks or {}).items():
            for callback in callbacks:
                self.add(event, callback)

    def __len__(self) -> int:
        return sum(len(callbacks) for callbacks in self._hooks.values())

    def __contains__(self, event: object) -> bool:
        if not isinstance(event, (str, FieldHook)):
            return False
        return bool(self._hooks.get(_event_name(event)))

    def __repr__(self) -> str:
        return f"<FilterPipeline events={self.events()!r}>"

    def add(self, event: FieldHook | str, callback: HookCallback) -> None:
        if not callable(callback):
            raise TypeError(f"Filter for '{_event_name(event)}' must be callable.")
        self._hooks.setdefault(_event_name(event), []).append(callback)

    def remove(self, event: FieldHook | str, callback: HookCallback | None = None) -> None:
        """Remove ``callback`` from ``event``, or every callback when omitted."""

        name = _event_name(event)
        if callback is None:
            self._hooks.pop(name, None)
            return
        callbacks = self._hooks.get(name)
        if not callbacks:
            return
        self._hooks[name] = [registered for registered in callbacks if registered != callback]
        if not self._hooks[name]:
            del self._hooks[name]

    def clear(self) -> None:
        self._hooks.clear()

    def callbacks(self, event: FieldHook | str) -> Tuple[HookCallback, ...]:
        return tuple(self._hooks.get(_event_name(event), ()))

    def events(self) -> List[str]:
        return [name for name, callbacks in self._hooks.items() if callbacks]

    def apply(self, event: FieldHook | str, markup: str, spec: Any, field_type: str) -> str:
        """Pass ``markup`` through every callback registered for ``event``."""

        for callback in self._hooks.get(_event_name(event), ()):
            result = callback(markup, spec, field_type)
            markup = "" if result is None else str(result)
        return markup

    def derive(self) -> "FilterPipeline":
        """Return a copy whose changes do not affect this pipeline."""

        child = FilterPipeline()
        child._hooks = {name: list(callbacks) for name, callbacks in self._hooks.items()}
        return child


#: Process-wide filters, applied to every field render.
FIELD_FILTERS = FilterPipeline()


def parse_filter_string(value: Any) -> Tuple[str, HookCallback] | None:
    """Split ``"event:dotted.path"`` into the event name and imported callback."""

    if not isinstance(value, str) or ":" not in value.strip(":"):
        if value:
            logger.debug("Ignoring filter declaration without separator: %r", value)
        return None
    event, path = (part.strip() for part in value.split(":", 1))
    try:
        callback = import_string(path)
    except ImportError as exc:
        raise InvalidFieldSpec(f"Cannot import filter callback '{path}' for '{event}'.") from exc
    if not callable(callback):
        raise InvalidFieldSpec(f"Filter callback '{path}' for '{event}' is not callable.")
    return event, callback


def register_field_filter(event: FieldHook | str, callback: HookCallback | str) -> None:
    """Add a filter to :data:`FIELD_FILTERS` unless it is already registered."""

    if isinstance(callback, str):
        callback = import_string(callback)
    if callback in FIELD_FILTERS.callbacks(event):
        logger.debug("Filter %r already registered for '%s'", callback, _event_name(event))
        return
    FIELD_FILTERS.add(event, callback)


def load_configured_filters() -> None:
    """Register the filters listed in ``FIELDKIT_FILTERS``."""

    for declaration in getattr(settings, "FIELDKIT_FILTERS", None) or ():
        try:
            parsed = parse_filter_string(declaration)
        except InvalidFieldSpec:
            logger.warning("Skipping unusable FIELDKIT_FILTERS entry %r", declaration, exc_info=True)
            continue
        if parsed is None:
            logger.warning("FIELDKIT_FILTERS entry %r is not in 'event:path' form", declaration)
            continue
        register_field_filter(*parsed)


def silent_label(markup: str, spec: Any = None, field_type: str = "") -> str:
    """Turn a ``<label>`` into a caption that does not toggle the field."""

    return markup.replace("<label", '<p class="field-label"').replace("</label>", "</p>")
