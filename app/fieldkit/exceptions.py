"""Exceptions raised by the field builder."""
from __future__ import annotations


class InvalidFieldSpec(ValueError):
    """Raised when a field cannot be built from the supplied arguments."""
