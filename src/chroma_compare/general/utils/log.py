"""
log.py.

Does: Topic-filtered debug lines for the record plumbing, switched on by
CHROMA_DEBUG_TOPICS (comma-separated topics, or 'all'). Silent when unset.
Returns: Prints ``[ts] [topic][LEVEL] msg k=v ...`` to stderr.
"""

import os
import sys
from datetime import datetime
from typing import Any, TextIO

__all__ = ["debug", "enabled", "reload_topics"]


def _load_topics() -> set[str]:
    raw = os.getenv("CHROMA_DEBUG_TOPICS", "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read CHROMA_DEBUG_TOPICS (tests flip it with monkeypatch)."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """Does: True when ``topic`` (or 'all') is listed in CHROMA_DEBUG_TOPICS."""
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS)


def debug(
    msg: str,
    topic: str = "records",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
    **fields: Any,
) -> None:
    """Does: Print a timestamped line for an enabled topic, with ``fields`` as trailing k=v pairs."""
    if not enabled(topic):
        return
    extra = "".join(f" {k}={v!r}" for k, v in fields.items())
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}{extra}", file=stream or sys.stderr)
