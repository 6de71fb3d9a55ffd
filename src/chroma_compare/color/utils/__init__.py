"""
utils package.
=============

Does: Provide the numeric color helpers: hex encoding, sRGB → Lab conversion
      and CIE76 distance.
"""

from .hex_codec import (
    clamp_channel,
    from_hex,
    to_hex,
)
from .lab_distance import (
    delta_e76,
    rgb_to_lab,
)

__all__ = [
    "to_hex",
    "from_hex",
    "clamp_channel",
    "rgb_to_lab",
    "delta_e76",
]

__docformat__ = "google"
