# constants.py
# ============

"""
constants.
=========

Does: Define the fixed colorimetric constants (sRGB transfer, D65 matrix and
      white point, CIE Lab compression) and the separation label ladder.
Used By: Lab conversion, classification, tests.
Returns: Pure data structures only (no side effects).
"""

# ── 1) sRGB transfer ─────────────────────────────────────────────────────────
SRGB_CHANNEL_MAX = 255.0
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
SRGB_OFFSET_SCALE = 1.055


# ── 2) Linear RGB → XYZ (D65), scaled to 0..100 ──────────────────────────────
XYZ_SCALE = 100.0

RGB_TO_XYZ_D65: tuple[tuple[float, float, float], ...] = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

# Reference white (Xn, Yn, Zn)
D65_WHITE: tuple[float, float, float] = (95.047, 100.000, 108.883)


# ── 3) CIE Lab compression ───────────────────────────────────────────────────
LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787
LAB_OFFSET = 16 / 116


# ── 4) Separation ladder (ascending, first match wins) ───────────────────────
# Thresholds were tuned against CIE76; changing the metric means re-deriving them.
SEPARATION_LADDER: tuple[tuple[float, str], ...] = (
    (5.0, "Indistinguishable"),
    (15.0, "Weak"),
    (30.0, "Moderate"),
)
SEPARATION_TOP_LABEL = "Strong"

DEGENERATE_SPLIT = 50.0
