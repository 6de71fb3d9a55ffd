"""Shared, domain-agnostic helpers (config, settings, debug logging)."""

__all__: list[str] = []
__docformat__ = "google"
