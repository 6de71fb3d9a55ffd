"""
workflows.py
============

Does: Use-case functions around the pure engine: capture a color from a
      selected region, hold the A/B/sample slots of a comparison, save it,
      recheck stored comparisons, and edit title/notes/feedback.
Used By: CLI and any front end that owns capture/selection/rendering.
Returns: ColorData, ComparisonRecord.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal, Optional

from chroma_compare.color import (
    ColorData,
    ComparisonMetrics,
    classify,
    color_data_from_sample,
    sample_region,
)
from chroma_compare.color.logic.region_sampler import PixelBuffer
from chroma_compare.errors import InvalidInput, SelectionTooSmall
from chroma_compare.general.utils import CompareSettings, debug, enabled, load_settings
from chroma_compare.records.model import (
    FEEDBACK_VALUES,
    ComparisonRecord,
    Feedback,
    NamedReference,
)
from chroma_compare.records.repository import RecordRepository

__all__ = [
    "Slot",
    "now_ms",
    "capture_color",
    "ComparisonSession",
    "save_comparison",
    "recheck",
    "recheck_all",
    "delete_record",
    "clear_history",
    "update_record",
    "toggle_feedback",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Slot = Literal["A", "B", "sample"]


def now_ms() -> int:
    return int(time.time() * 1000)


# =============================================================================
# 1) CAPTURE
# =============================================================================

def capture_color(
    pixels: PixelBuffer,
    width: int,
    height: int,
    settings: Optional[CompareSettings] = None,
    debug_trace: bool = False,
) -> ColorData:
    """
    Sample a selected region and snapshot its representative color.

    Selections narrower or shorter than ``min_selection_px`` raise
    SelectionTooSmall before any pixel is read.
    """
    cfg = settings or load_settings()
    min_px = cfg["min_selection_px"]
    if width < min_px or height < min_px:
        raise SelectionTooSmall(
            f"Selection {width}x{height} is smaller than {min_px}x{min_px} pixels"
        )

    color = color_data_from_sample(sample_region(pixels, width, height))
    if debug_trace and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "[CAPTURE] %dx%d → median=%s mean=%s hex=%s",
            width,
            height,
            color.rgb,
            color.avg_rgb,
            color.hex,
        )
    return color


# =============================================================================
# 2) SESSION
# =============================================================================

@dataclass
class ComparisonSession:
    """Working state of one comparison: two named references and a sample."""

    ref_a_name: str = "Reference A"
    ref_b_name: str = "Reference B"
    ref_a: Optional[ColorData] = None
    ref_b: Optional[ColorData] = None
    sample: Optional[ColorData] = None

    @classmethod
    def from_settings(cls, settings: Optional[CompareSettings] = None) -> ComparisonSession:
        cfg = settings or load_settings()
        return cls(ref_a_name=cfg["default_ref_a_name"], ref_b_name=cfg["default_ref_b_name"])

    def assign(self, slot: Slot, color: ColorData) -> None:
        if slot == "A":
            self.ref_a = color
        elif slot == "B":
            self.ref_b = color
        elif slot == "sample":
            self.sample = color
        else:
            raise InvalidInput(f"Unknown slot {slot!r} (expected 'A', 'B' or 'sample')")
        debug("slot assigned", topic="session", slot=slot, hex=color.hex)

    def rename(self, slot: Literal["A", "B"], name: str) -> None:
        if slot == "A":
            self.ref_a_name = name
        elif slot == "B":
            self.ref_b_name = name
        else:
            raise InvalidInput(f"Only references can be renamed, got {slot!r}")

    @property
    def is_complete(self) -> bool:
        return self.ref_a is not None and self.ref_b is not None and self.sample is not None

    @property
    def metrics(self) -> Optional[ComparisonMetrics]:
        """Metrics for the current slots, or None until all three are set."""
        if self.ref_a is None or self.ref_b is None or self.sample is None:
            return None
        return classify(self.sample, self.ref_a, self.ref_b)

    def build_record(self, thumbnail: str = "", now: Optional[int] = None) -> ComparisonRecord:
        metrics = self.metrics
        if metrics is None or self.ref_a is None or self.ref_b is None or self.sample is None:
            raise InvalidInput("A comparison needs both references and a sample")
        stamp = now if now is not None else now_ms()
        title = f"Comparison - {datetime.fromtimestamp(stamp / 1000):%Y-%m-%d %H:%M:%S}"
        return ComparisonRecord(
            id=str(uuid.uuid4()),
            timestamp=stamp,
            title=title,
            ref_a=NamedReference(self.ref_a_name, self.ref_a),
            ref_b=NamedReference(self.ref_b_name, self.ref_b),
            sample=self.sample,
            metrics=metrics,
            thumbnail=thumbnail,
        )


# =============================================================================
# 3) PERSISTED RECORDS
# =============================================================================

def save_comparison(
    repo: RecordRepository,
    session: ComparisonSession,
    thumbnail: str = "",
    now: Optional[int] = None,
) -> ComparisonRecord:
    """Does: Build a record from a complete session and save it."""
    record = session.build_record(thumbnail=thumbnail, now=now)
    repo.save(record)
    logger.info("Saved comparison %s (%s)", record.id, record.metrics.separation_label)
    return record


def recheck(
    repo: RecordRepository,
    record: ComparisonRecord,
    now: Optional[int] = None,
) -> ComparisonRecord:
    """Does: Re-run the classifier on stored colors; old metrics move to previous_metrics."""
    fresh = classify(record.sample, record.ref_a.color, record.ref_b.color)
    updated = replace(
        record,
        metrics=fresh,
        previous_metrics=record.metrics,
        last_checked_at=now if now is not None else now_ms(),
    )
    repo.save(updated)
    if fresh != record.metrics:
        logger.info(
            "Recheck %s changed: toward A %.1f%% → %.1f%%",
            record.id,
            record.metrics.toward_a,
            fresh.toward_a,
        )
    elif enabled("records"):
        debug("recheck unchanged", topic="records", id=record.id, label=fresh.separation_label)
    return updated


def recheck_all(repo: RecordRepository, now: Optional[int] = None) -> list[ComparisonRecord]:
    stamp = now if now is not None else now_ms()
    return [recheck(repo, r, now=stamp) for r in repo.get_all()]


def delete_record(repo: RecordRepository, record_id: str) -> bool:
    """Does: Remove one record; returns False when no record has that id."""
    if not any(r.id == record_id for r in repo.get_all()):
        logger.debug("delete_record: unknown id %s", record_id)
        return False
    repo.delete(record_id)
    logger.info("Deleted comparison %s", record_id)
    return True


def clear_history(repo: RecordRepository) -> int:
    """Does: Remove every record; returns how many were removed."""
    n = len(repo.get_all())
    repo.clear_all()
    logger.info("Cleared %d comparisons", n)
    return n


def update_record(
    repo: RecordRepository,
    record: ComparisonRecord,
    *,
    title: Optional[str] = None,
    notes: Optional[str] = None,
    feedback: Feedback | Literal["keep"] = "keep",
) -> ComparisonRecord:
    """Does: Apply title/notes/feedback edits and save; other fields are never touched here."""
    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = title
    if notes is not None:
        changes["notes"] = notes
    if feedback != "keep":
        if feedback not in FEEDBACK_VALUES:
            raise InvalidInput(f"Feedback must be 'liked', 'disliked' or None, got {feedback!r}")
        changes["feedback"] = feedback
    updated = replace(record, **changes)
    repo.save(updated)
    return updated


def toggle_feedback(
    repo: RecordRepository,
    record: ComparisonRecord,
    value: Literal["liked", "disliked"],
) -> ComparisonRecord:
    """Does: Set feedback to ``value``, or clear it when it already equals ``value``."""
    return update_record(repo, record, feedback=None if record.feedback == value else value)
