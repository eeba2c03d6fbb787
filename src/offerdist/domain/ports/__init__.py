"""Domain port definitions for adapters."""

from __future__ import annotations

from .graph_store import (
    GraphStore,
    GraphStoreError,
    Mutation,
    StoreQueryFailedError,
    StoreTimeoutError,
    StoreUnavailableError,
)

__all__ = [
    "GraphStore",
    "GraphStoreError",
    "Mutation",
    "StoreQueryFailedError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
