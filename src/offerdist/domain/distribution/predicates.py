"""Existence checks detecting each class of distribution inconsistency."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .patterns import (
    excluded_links_on_constrained_businesses,
    links_on_unconstrained_businesses,
    missing_links_on_constrained_businesses,
)

if TYPE_CHECKING:
    from offerdist.domain.ports.graph_store import GraphStore


def has_links_on_unconstrained_businesses(store: GraphStore) -> bool:
    """Check whether any offering is still tied to a business without constraints."""

    return store.ask(links_on_unconstrained_businesses())


def has_missing_links_on_constrained_businesses(store: GraphStore) -> bool:
    """Check whether an offering lacks a constrained business that does not exclude it."""

    return store.ask(missing_links_on_constrained_businesses())


def has_excluded_links_on_constrained_businesses(store: GraphStore) -> bool:
    """Check whether an offering is tied to a constrained business that excludes it."""

    return store.ask(excluded_links_on_constrained_businesses())
