"""
color.
=====

Does: Aggregate the perceptual comparison engine: value types, colorimetric
      constants, hex codec, Lab conversion, CIE76 distance, region sampling
      and two-reference classification.
Used By: Records workflows, CLI, tests.
Returns: Pure functions and immutable value types; nothing here logs,
         caches or performs I/O.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import RGB, ColorData, ComparisonMetrics, Lab, RegionSample

# ── Numeric helpers ──────────────────────────────────────────────────────────
from .utils import delta_e76, from_hex, rgb_to_lab, to_hex

# ── Sampling / classification ────────────────────────────────────────────────
from .logic import (
    classify,
    color_data_from_sample,
    make_color_data,
    sample_region,
    separation_label,
)

__all__ = [
    # types
    "RGB",
    "Lab",
    "ColorData",
    "RegionSample",
    "ComparisonMetrics",
    # helpers
    "to_hex",
    "from_hex",
    "rgb_to_lab",
    "delta_e76",
    # logic
    "sample_region",
    "make_color_data",
    "color_data_from_sample",
    "classify",
    "separation_label",
]
