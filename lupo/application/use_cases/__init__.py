"""Application use cases package."""

from .check_store import CheckStoreResult, CheckStoreUseCase
from .list_trades import ListTradesUseCase

__all__ = [
    "CheckStoreResult",
    "CheckStoreUseCase",
    "ListTradesUseCase",
]
