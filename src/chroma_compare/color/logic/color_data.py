"""
color_data.py.
=============

Does: Build immutable ColorData snapshots from a representative RGB (and an
optional mean RGB) by deriving the hex and Lab forms.
Used By: Capture workflow, CLI compare, record deserialization tests.
"""

from __future__ import annotations

from chroma_compare.color.types import RGB, ColorData, RegionSample
from chroma_compare.color.utils import rgb_to_lab, to_hex

__all__ = ["make_color_data", "color_data_from_sample"]


def make_color_data(rgb: RGB | tuple[float, float, float], avg_rgb: RGB | None = None) -> ColorData:
    """Does: Snapshot ``rgb`` as ColorData; ``avg_rgb`` defaults to ``rgb``."""
    primary = RGB(*rgb)
    return ColorData(
        hex=to_hex(primary),
        rgb=primary,
        lab=rgb_to_lab(primary),
        avg_rgb=RGB(*avg_rgb) if avg_rgb is not None else primary,
    )


def color_data_from_sample(sample: RegionSample) -> ColorData:
    """Does: Use the median as the canonical color and keep the mean alongside."""
    return make_color_data(sample.median, sample.mean)
