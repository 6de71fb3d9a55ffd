"""
lab_distance.py
===============

Does: Convert sRGB (0–255) to CIE L*a*b* under D65 and compute the CIE76
      ΔE between two Lab colors.
Used By: Color capture, comparison classification, CLI.
Returns: Lab triples and distances (float).
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from chroma_compare.color.constants import (
    D65_WHITE,
    LAB_EPSILON,
    LAB_KAPPA_SLOPE,
    LAB_OFFSET,
    RGB_TO_XYZ_D65,
    SRGB_CHANNEL_MAX,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_OFFSET_SCALE,
    XYZ_SCALE,
)
from chroma_compare.color.types import RGB, Lab
from chroma_compare.errors import InvalidInput

# Public surface
__all__ = [
    "rgb_to_lab",
    "delta_e76",
]
__docformat__ = "google"


# =============================================================================
# 1) VALIDATION
# =============================================================================

def _finite_triple(values: Iterable[float], kind: str) -> tuple[float, float, float]:
    """Coerce to a float triple; non-numeric or non-finite values raise InvalidInput."""
    try:
        x, y, z = (float(v) for v in values)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{kind} must be three numbers, got {values!r}") from e
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        raise InvalidInput(f"{kind} has non-finite channel: {values!r}")
    return x, y, z


# =============================================================================
# 2) CONVERSION
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    v = v / SRGB_CHANNEL_MAX
    if v > SRGB_LINEAR_THRESHOLD:
        return ((v + SRGB_OFFSET) / SRGB_OFFSET_SCALE) ** SRGB_GAMMA
    return v / SRGB_LINEAR_SLOPE


def _rgb_to_xyz(rgb: tuple[float, float, float]) -> tuple[float, float, float]:
    r, g, b = (_srgb_to_linear(c) * XYZ_SCALE for c in rgb)
    x, y, z = (r * mr + g * mg + b * mb for mr, mg, mb in RGB_TO_XYZ_D65)
    return x, y, z


def _f_lab(t: float) -> float:
    return t ** (1 / 3) if t > LAB_EPSILON else LAB_KAPPA_SLOPE * t + LAB_OFFSET


def rgb_to_lab(rgb: RGB | Iterable[float]) -> Lab:
    """Does: Map an sRGB color (channels 0–255, not necessarily integral) to Lab (D65)."""
    channels = _finite_triple(rgb, "RGB")
    try:
        x, y, z = _rgb_to_xyz(channels)
    except OverflowError as e:
        raise InvalidInput(f"RGB too large to convert: {rgb!r}") from e
    xn, yn, zn = D65_WHITE
    fx, fy, fz = _f_lab(x / xn), _f_lab(y / yn), _f_lab(z / zn)
    lab = Lab(
        l=116 * fy - 16,
        a=500 * (fx - fy),
        b=200 * (fy - fz),
    )
    if not all(math.isfinite(v) for v in lab):
        raise InvalidInput(f"RGB too large to convert: {rgb!r}")
    return lab


# =============================================================================
# 3) DISTANCE
# =============================================================================

def delta_e76(lab1: Lab | Iterable[float], lab2: Lab | Iterable[float]) -> float:
    """Does: Compute ΔE76, the plain Euclidean distance between two Lab colors."""
    l1, a1, b1 = _finite_triple(lab1, "Lab")
    l2, a2, b2 = _finite_triple(lab2, "Lab")
    return math.hypot(l1 - l2, a1 - a2, b1 - b2)
