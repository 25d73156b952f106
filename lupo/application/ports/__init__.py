"""Application ports package."""

from .record_store import RecordStorePort

__all__ = ["RecordStorePort"]
