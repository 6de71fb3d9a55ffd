# chroma_compare/color/types.py
"""
types.py.

Does: Define the immutable value types shared by the comparison engine.
RGB/Lab are plain named triples so they unpack like the tuples callers
already pass around.
"""

from __future__ import annotations

from typing import NamedTuple


class RGB(NamedTuple):
    r: float
    g: float
    b: float


class Lab(NamedTuple):
    l: float  # noqa: E741
    a: float
    b: float


class ColorData(NamedTuple):
    """Snapshot of a sampled color: canonical hex, median RGB, Lab, mean RGB."""

    hex: str
    rgb: RGB
    lab: Lab
    avg_rgb: RGB


class RegionSample(NamedTuple):
    median: RGB
    mean: RGB


class ComparisonMetrics(NamedTuple):
    """Distances to both references, the percentage split and its label."""

    d_a: float
    d_b: float
    toward_a: float
    toward_b: float
    separation: float
    separation_label: str


__all__ = ["RGB", "Lab", "ColorData", "RegionSample", "ComparisonMetrics"]

__docformat__ = "google"
