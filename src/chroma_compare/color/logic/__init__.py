"""
logic
=====

Thin namespace for the region sampler and the comparison classifier.

Public API:
- sampling      : sample_region, make_color_data, color_data_from_sample
- classification: classify, separation_label
"""

from __future__ import annotations

from .classification import classify, separation_label
from .color_data import color_data_from_sample, make_color_data
from .region_sampler import sample_region

__all__ = [
    "sample_region",
    "make_color_data",
    "color_data_from_sample",
    "classify",
    "separation_label",
]

__docformat__ = "google"
