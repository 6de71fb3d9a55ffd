"""
classifier.py.
=============

Does: Decide which of two reference colors a sample resembles more, turning
the two CIE76 distances into a percentage split and a separation label.
Returns: ComparisonMetrics.
Used By: Comparison session, recheck workflow, CLI compare.
"""

from __future__ import annotations

from chroma_compare.color.constants import (
    DEGENERATE_SPLIT,
    SEPARATION_LADDER,
    SEPARATION_TOP_LABEL,
)
from chroma_compare.color.types import ColorData, ComparisonMetrics
from chroma_compare.color.utils import delta_e76

__all__ = ["classify", "separation_label"]

__docformat__ = "google"


def _clamp_pct(v: float) -> float:
    return max(0.0, min(100.0, v))


def separation_label(separation: float) -> str:
    """Does: Map a separation percentage to its label (lower bounds inclusive)."""
    for upper, label in SEPARATION_LADDER:
        if separation < upper:
            return label
    return SEPARATION_TOP_LABEL


def classify(sample: ColorData, ref_a: ColorData, ref_b: ColorData) -> ComparisonMetrics:
    """
    Compare ``sample`` against ``ref_a`` and ``ref_b`` in Lab space.

    ``toward_a`` grows as the sample gets closer to A; ``toward_b`` is its
    exact complement so the pair always sums to 100. When all three colors
    coincide the split is a 50/50 tie with zero separation.
    """
    d_a = delta_e76(sample.lab, ref_a.lab)
    d_b = delta_e76(sample.lab, ref_b.lab)
    total = d_a + d_b

    if total > 0:
        toward_a = (d_b / total) * 100
        toward_b = 100 - toward_a
        separation = (abs(d_a - d_b) / total) * 100
    else:
        toward_a = toward_b = DEGENERATE_SPLIT
        separation = 0.0

    return ComparisonMetrics(
        d_a=d_a,
        d_b=d_b,
        toward_a=_clamp_pct(toward_a),
        toward_b=_clamp_pct(toward_b),
        separation=separation,
        separation_label=separation_label(separation),
    )
