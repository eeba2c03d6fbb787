"""Bounded rewrites resolving one batch of distribution inconsistencies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from offerdist.domain.ports.graph_store import Mutation

from .patterns import (
    LINK_TEMPLATE,
    excluded_links_on_constrained_businesses,
    links_on_unconstrained_businesses,
    missing_links_on_constrained_businesses,
)

if TYPE_CHECKING:
    from offerdist.domain.ports.graph_store import GraphStore

DEFAULT_BATCH_SIZE: Final[int] = 100
MAX_BATCH_SIZE: Final[int] = 100


def check_batch_size(batch_size: int) -> int:
    if not 1 <= batch_size <= MAX_BATCH_SIZE:
        raise ValueError(f"Batch size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}")
    return batch_size


def remove_links_on_unconstrained_businesses(
    store: GraphStore, *, batch_size: int = DEFAULT_BATCH_SIZE
) -> None:
    """Remove (at most ``batch_size``) links from offerings to unconstrained businesses."""

    store.mutate(
        Mutation(
            where=links_on_unconstrained_businesses(),
            delete=LINK_TEMPLATE,
            limit=check_batch_size(batch_size),
        )
    )


def add_missing_links_on_constrained_businesses(
    store: GraphStore, *, batch_size: int = DEFAULT_BATCH_SIZE
) -> None:
    """Add (at most ``batch_size``) links a constrained business should have."""

    store.mutate(
        Mutation(
            where=missing_links_on_constrained_businesses(),
            insert=LINK_TEMPLATE,
            limit=check_batch_size(batch_size),
        )
    )


def remove_excluded_links_on_constrained_businesses(
    store: GraphStore, *, batch_size: int = DEFAULT_BATCH_SIZE
) -> None:
    """Remove (at most ``batch_size``) links a constrained business excludes."""

    store.mutate(
        Mutation(
            where=excluded_links_on_constrained_businesses(),
            delete=LINK_TEMPLATE,
            limit=check_batch_size(batch_size),
        )
    )
