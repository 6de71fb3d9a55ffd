"""
chroma_compare
==============

Does: Root package for the perceptual color comparison toolkit.
Returns: Re-exports the engine entry points (rgb_to_lab, delta_e76,
         sample_region, classify, to_hex) and the error taxonomy.
Used by: CLI, record workflows, external front ends.
"""

from .color import (
    RGB,
    ColorData,
    ComparisonMetrics,
    Lab,
    classify,
    delta_e76,
    rgb_to_lab,
    sample_region,
    to_hex,
)
from .errors import ChromaCompareError, EmptyRegion, InvalidInput

__all__ = [
    "RGB",
    "Lab",
    "ColorData",
    "ComparisonMetrics",
    "rgb_to_lab",
    "delta_e76",
    "sample_region",
    "classify",
    "to_hex",
    "ChromaCompareError",
    "InvalidInput",
    "EmptyRegion",
]
__version__ = "0.1.0"
__docformat__ = "google"
