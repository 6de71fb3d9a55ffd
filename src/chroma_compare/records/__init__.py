"""
records
=======

Does: Persisted comparison records: shape + JSON mapping, repositories,
      CSV/JSON interchange, use-case workflows and history search.
"""

from __future__ import annotations

from .interchange import export_csv, export_filename, export_json, import_json
from .model import ComparisonRecord, NamedReference, record_from_dict, record_to_dict
from .repository import InMemoryRecordRepository, JsonFileRecordRepository, RecordRepository
from .search import filter_records, matches_query
from .workflows import (
    ComparisonSession,
    capture_color,
    clear_history,
    delete_record,
    recheck,
    recheck_all,
    save_comparison,
    toggle_feedback,
    update_record,
)

__all__ = [
    # model
    "ComparisonRecord",
    "NamedReference",
    "record_to_dict",
    "record_from_dict",
    # repositories
    "RecordRepository",
    "InMemoryRecordRepository",
    "JsonFileRecordRepository",
    # interchange
    "export_csv",
    "export_json",
    "import_json",
    "export_filename",
    # workflows
    "capture_color",
    "ComparisonSession",
    "save_comparison",
    "recheck",
    "recheck_all",
    "delete_record",
    "clear_history",
    "update_record",
    "toggle_feedback",
    # search
    "filter_records",
    "matches_query",
]

__docformat__ = "google"
