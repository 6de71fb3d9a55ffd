"""
interchange.py
==============

Does: Export records as CSV rows or as a JSON array, import a JSON array
      back through a repository, and name export files.
Used By: CLI export/import commands, tests.
Returns: Text documents (str) and import counts.
"""

from __future__ import annotations

import csv
import io
import json
import logging
import time
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Literal

from chroma_compare.errors import RecordImportError
from chroma_compare.records.model import ComparisonRecord, record_from_dict, record_to_dict
from chroma_compare.records.repository import RecordRepository

__all__ = [
    "CSV_HEADERS",
    "export_csv",
    "export_json",
    "import_json",
    "export_filename",
    "iso_timestamp",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

CSV_HEADERS = (
    "ID",
    "Timestamp",
    "Title",
    "RefA_Name",
    "RefA_Hex",
    "RefB_Name",
    "RefB_Hex",
    "Sample_Hex",
    "DeltaE_A",
    "DeltaE_B",
    "TowardA_Pct",
    "TowardB_Pct",
    "Feedback",
    "Notes",
)


def iso_timestamp(epoch_ms: int) -> str:
    """Does: Format epoch milliseconds as ISO-8601 UTC with a trailing 'Z'."""
    dt = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _csv_row(r: ComparisonRecord) -> list[str]:
    return [
        r.id,
        iso_timestamp(r.timestamp),
        r.title,
        r.ref_a.name,
        r.ref_a.color.hex,
        r.ref_b.name,
        r.ref_b.color.hex,
        r.sample.hex,
        f"{r.metrics.d_a:.3f}",
        f"{r.metrics.d_b:.3f}",
        f"{r.metrics.toward_a:.1f}",
        f"{r.metrics.toward_b:.1f}",
        r.feedback or "unrated",
        (r.notes or "").replace(",", ";"),
    ]


def export_csv(records: Iterable[ComparisonRecord]) -> str:
    """Does: Render one header row plus one summary row per record."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    n = 0
    for r in records:
        writer.writerow(_csv_row(r))
        n += 1
    logger.debug("Exported %d records as CSV", n)
    return buf.getvalue()


def export_json(records: Iterable[ComparisonRecord]) -> str:
    """Does: Render the full record documents as a pretty-printed JSON array."""
    docs = [record_to_dict(r) for r in records]
    logger.debug("Exported %d records as JSON", len(docs))
    return json.dumps(docs, indent=2, ensure_ascii=False)


def import_json(repo: RecordRepository, text: str) -> int:
    """
    Parse a JSON array of records and save each through ``repo``.

    The whole document is validated before anything is saved, so a bad
    entry leaves the repository untouched. Returns the number saved.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordImportError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise RecordImportError(f"Expected a JSON array of records, got {type(data).__name__}")

    records = [record_from_dict(d) for d in data]
    for record in records:
        repo.save(record)
    logger.info("Imported %d records", len(records))
    return len(records)


def export_filename(
    kind: Literal["csv", "json"],
    basename: str = "chroma_compare",
    now_ms: int | None = None,
) -> str:
    """Does: Build ``<basename>_<epoch ms>.<kind>``."""
    if kind not in ("csv", "json"):
        raise ValueError(f"Unknown export kind '{kind}'")
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{basename}_{stamp}.{kind}"
