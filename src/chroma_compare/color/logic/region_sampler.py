"""
region_sampler.py.
=================

Does: Reduce a rectangular RGBA pixel buffer to two representative colors,
the per-channel median (robust to highlights/noise) and the per-channel mean.
Returns: RegionSample(median=RGB, mean=RGB).
Used By: Color capture workflow, CLI, tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from statistics import median

from chroma_compare.color.types import RGB, RegionSample
from chroma_compare.errors import EmptyRegion, InvalidInput

__all__ = ["sample_region", "BYTES_PER_PIXEL"]

__docformat__ = "google"

BYTES_PER_PIXEL = 4  # R, G, B, A (alpha ignored)

PixelBuffer = bytes | bytearray | memoryview | Sequence[int]


def _as_bytes(pixels: PixelBuffer) -> bytes:
    if isinstance(pixels, bytes):
        return pixels
    try:
        return bytes(pixels)
    except (TypeError, ValueError) as e:
        raise InvalidInput("Pixel buffer must hold byte values 0–255") from e


def sample_region(pixels: PixelBuffer, width: int, height: int) -> RegionSample:
    """
    Compute median and mean RGB over ``width * height`` row-major RGBA pixels.

    Even pixel counts take the average of the two middle values as median.
    Raises EmptyRegion for a zero-pixel region and InvalidInput when the
    buffer length does not match the dimensions.
    """
    if width < 0 or height < 0:
        raise InvalidInput(f"Region dimensions must be non-negative: {width}x{height}")
    count = width * height
    if count == 0:
        raise EmptyRegion(f"Region {width}x{height} has no pixels")

    data = _as_bytes(pixels)
    if len(data) != count * BYTES_PER_PIXEL:
        raise InvalidInput(
            f"Buffer holds {len(data)} bytes, expected {count * BYTES_PER_PIXEL} "
            f"for {width}x{height} RGBA"
        )

    channels = [data[offset::BYTES_PER_PIXEL] for offset in range(3)]
    med = RGB(*(float(median(ch)) for ch in channels))
    mean = RGB(*(sum(ch) / count for ch in channels))
    return RegionSample(median=med, mean=mean)
