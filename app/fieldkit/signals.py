"""Signals emitted by the field builder."""
from __future__ import annotations

from django.dispatch import Signal

# ``spec`` is the resolved ``FieldSpec`` and ``html`` the final markup of the
# field that was just built.
field_rendered = Signal()
