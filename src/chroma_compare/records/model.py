"""
model.py
========

Does: Define the persisted ComparisonRecord shape and map it to/from the
      camelCase JSON document used for storage and interchange.
Used By: Repositories, interchange (CSV/JSON), workflows, CLI.
Returns: Dataclasses and plain dicts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Optional

from chroma_compare.color.types import RGB, ColorData, ComparisonMetrics, Lab
from chroma_compare.errors import RecordImportError

__all__ = [
    "Feedback",
    "FEEDBACK_VALUES",
    "NamedReference",
    "ComparisonRecord",
    "record_to_dict",
    "record_from_dict",
    "color_to_dict",
    "color_from_dict",
    "metrics_to_dict",
    "metrics_from_dict",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Feedback = Optional[Literal["liked", "disliked"]]
FEEDBACK_VALUES: tuple[Feedback, ...] = ("liked", "disliked", None)


@dataclass
class NamedReference:
    name: str
    color: ColorData


@dataclass
class ComparisonRecord:
    """A saved comparison; only metrics/previous_metrics/last_checked_at are recomputed."""

    id: str
    timestamp: int  # epoch ms
    title: str
    ref_a: NamedReference
    ref_b: NamedReference
    sample: ColorData
    metrics: ComparisonMetrics
    notes: str = ""
    feedback: Feedback = None
    thumbnail: str = ""
    previous_metrics: Optional[ComparisonMetrics] = None
    last_checked_at: Optional[int] = None


# =============================================================================
# 1) TO DICT
# =============================================================================

def _rgb_to_dict(rgb: RGB) -> dict[str, float]:
    return {"r": rgb.r, "g": rgb.g, "b": rgb.b}


def color_to_dict(color: ColorData) -> dict[str, Any]:
    return {
        "hex": color.hex,
        "rgb": _rgb_to_dict(color.rgb),
        "lab": {"l": color.lab.l, "a": color.lab.a, "b": color.lab.b},
        "avgRgb": _rgb_to_dict(color.avg_rgb),
    }


def metrics_to_dict(metrics: ComparisonMetrics) -> dict[str, Any]:
    return {
        "dA": metrics.d_a,
        "dB": metrics.d_b,
        "towardA": metrics.toward_a,
        "towardB": metrics.toward_b,
        "separation": metrics.separation,
        "separationLabel": metrics.separation_label,
    }


def record_to_dict(record: ComparisonRecord) -> dict[str, Any]:
    """Does: Serialize a record to its JSON document; optional fields are omitted when unset."""
    out: dict[str, Any] = {
        "id": record.id,
        "timestamp": record.timestamp,
        "title": record.title,
        "refA": {"name": record.ref_a.name, "color": color_to_dict(record.ref_a.color)},
        "refB": {"name": record.ref_b.name, "color": color_to_dict(record.ref_b.color)},
        "sample": color_to_dict(record.sample),
        "metrics": metrics_to_dict(record.metrics),
        "notes": record.notes,
        "feedback": record.feedback,
        "thumbnail": record.thumbnail,
    }
    if record.last_checked_at is not None:
        out["lastCheckedAt"] = record.last_checked_at
    if record.previous_metrics is not None:
        out["previousMetrics"] = metrics_to_dict(record.previous_metrics)
    return out


# =============================================================================
# 2) FROM DICT
# =============================================================================

def _rgb_from_dict(d: dict[str, Any]) -> RGB:
    return RGB(float(d["r"]), float(d["g"]), float(d["b"]))


def color_from_dict(d: dict[str, Any]) -> ColorData:
    lab = d["lab"]
    return ColorData(
        hex=str(d["hex"]),
        rgb=_rgb_from_dict(d["rgb"]),
        lab=Lab(float(lab["l"]), float(lab["a"]), float(lab["b"])),
        avg_rgb=_rgb_from_dict(d.get("avgRgb") or d["rgb"]),
    )


def metrics_from_dict(d: dict[str, Any]) -> ComparisonMetrics:
    return ComparisonMetrics(
        d_a=float(d["dA"]),
        d_b=float(d["dB"]),
        toward_a=float(d["towardA"]),
        toward_b=float(d["towardB"]),
        separation=float(d["separation"]),
        separation_label=str(d["separationLabel"]),
    )


def _reference_from_dict(d: dict[str, Any]) -> NamedReference:
    return NamedReference(name=str(d["name"]), color=color_from_dict(d["color"]))


def record_from_dict(d: Any) -> ComparisonRecord:
    """Does: Parse a record document; any missing/mistyped field raises RecordImportError."""
    if not isinstance(d, dict):
        raise RecordImportError(f"Record must be an object, got {type(d).__name__}")
    try:
        feedback = d.get("feedback")
        if feedback not in FEEDBACK_VALUES:
            raise ValueError(f"unknown feedback {feedback!r}")
        previous = d.get("previousMetrics")
        last_checked = d.get("lastCheckedAt")
        return ComparisonRecord(
            id=str(d["id"]),
            timestamp=int(d["timestamp"]),
            title=str(d.get("title") or ""),
            ref_a=_reference_from_dict(d["refA"]),
            ref_b=_reference_from_dict(d["refB"]),
            sample=color_from_dict(d["sample"]),
            metrics=metrics_from_dict(d["metrics"]),
            notes=str(d.get("notes") or ""),
            feedback=feedback,
            thumbnail=str(d.get("thumbnail") or ""),
            previous_metrics=metrics_from_dict(previous) if previous else None,
            last_checked_at=int(last_checked) if last_checked is not None else None,
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.debug("Rejected record document %r: %s", d.get("id"), e)
        raise RecordImportError(f"Malformed record {d.get('id')!r}: {e}") from e
