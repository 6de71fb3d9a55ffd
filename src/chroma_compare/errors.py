"""
errors.py
=========

Does: Define the typed failures raised by the comparison engine and the
      record plumbing around it.
Used By: Color conversion, distance, region sampling, classification,
         capture/recheck workflows, JSON import, CLI.
Returns: Exception classes only (no side effects).
"""

from __future__ import annotations

__all__ = [
    "ChromaCompareError",
    "InvalidInput",
    "EmptyRegion",
    "SelectionTooSmall",
    "RecordImportError",
]
__docformat__ = "google"


class ChromaCompareError(ValueError):
    """Base class for every error raised by chroma_compare."""


class InvalidInput(ChromaCompareError):
    """Raise when a numeric input is non-finite or outside its domain."""


class EmptyRegion(ChromaCompareError):
    """Raise when a sampling request covers zero pixels."""


class SelectionTooSmall(EmptyRegion):
    """Raise when a selection is under the configured minimum size."""


class RecordImportError(ChromaCompareError):
    """Raise when an interchange document cannot be turned into records."""
