"""Two-reference comparison classifier."""

from .classifier import classify, separation_label

__all__ = ["classify", "separation_label"]
