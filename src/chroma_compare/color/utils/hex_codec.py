"""
hex_codec.py
============

Does: Encode RGB triples as canonical lowercase ``#rrggbb`` strings (clamped,
      half-up rounding) and parse hex strings back into RGB.
Used By: Color capture, CSV export, CLI input.
Returns: Hex strings and RGB triples.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import webcolors

from chroma_compare.color.types import RGB
from chroma_compare.errors import InvalidInput

__all__ = ["to_hex", "from_hex", "clamp_channel"]
__docformat__ = "google"


def clamp_channel(v: float) -> int:
    """Does: Clamp a channel to [0, 255] and round half up to an int."""
    try:
        f = float(v)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Channel is not a number: {v!r}") from e
    if not math.isfinite(f):
        raise InvalidInput(f"Channel is not finite: {v!r}")
    clamped = min(255.0, max(0.0, f))
    return int(math.floor(clamped + 0.5))


def to_hex(rgb: RGB | Iterable[float]) -> str:
    """Does: Format an RGB triple as ``#rrggbb`` after clamping to 0–255."""
    try:
        r, g, b = rgb
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"RGB must be three numbers, got {rgb!r}") from e
    return webcolors.rgb_to_hex((clamp_channel(r), clamp_channel(g), clamp_channel(b)))


def from_hex(text: str) -> RGB:
    """Does: Parse ``#rrggbb`` / ``#rgb`` (leading '#' optional) into an RGB triple."""
    raw = (text or "").strip()
    if not raw.startswith("#"):
        raw = f"#{raw}"
    try:
        parsed = webcolors.hex_to_rgb(raw)
    except ValueError as e:
        raise InvalidInput(f"Not a hex color: {text!r}") from e
    return RGB(float(parsed.red), float(parsed.green), float(parsed.blue))
