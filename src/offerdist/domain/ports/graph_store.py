"""Port for the shared graph store holding offerings and businesses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

DEFAULT_BINDINGS: tuple[str, ...] = ("business", "offering")


class GraphStoreError(RuntimeError):
    """Base class for failures reported by a graph store adapter."""


class StoreUnavailableError(GraphStoreError):
    """Raised when the store cannot be reached (connection or transport failure)."""


class StoreQueryFailedError(GraphStoreError):
    """Raised when the store rejects a query or update as malformed or invalid."""


class StoreTimeoutError(GraphStoreError):
    """Raised when the store does not answer within the configured timeout."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Mutation:
    """Bounded rewrite request.

    ``where`` is a group graph pattern producing the ``bindings`` variables. The
    adapter selects at most ``limit`` distinct binding rows from it and applies
    the ``delete``/``insert`` templates to each row, all within one request.
    """

    where: str
    delete: str | None = None
    insert: str | None = None
    limit: int
    bindings: tuple[str, ...] = DEFAULT_BINDINGS

    def __post_init__(self) -> None:
        if self.delete is None and self.insert is None:
            raise ValueError("Mutation needs a delete or an insert template")
        if self.limit < 1:
            raise ValueError(f"Mutation limit must be positive, got {self.limit}")
        if not self.bindings:
            raise ValueError("Mutation must project at least one binding")


@runtime_checkable
class GraphStore(Protocol):
    """Blocking query/update contract consumed by the reconciliation engine."""

    def ask(self, pattern: str) -> bool:
        """Return whether ``pattern`` has at least one solution in the current store."""
        ...

    def mutate(self, mutation: Mutation) -> None:
        """Apply ``mutation`` atomically or raise a :class:`GraphStoreError`."""
        ...


__all__ = [
    "DEFAULT_BINDINGS",
    "GraphStore",
    "GraphStoreError",
    "Mutation",
    "StoreQueryFailedError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
