"""Offering distribution: keep ``gr:availableAtOrFrom`` in line with business rules.

Three phases each repair one kind of inconsistency:
1) drop links pointing at businesses without exclusion rules
2) add links a constrained business allows but lacks
3) drop links a constrained business excludes
"""

from __future__ import annotations

from .driver import (
    PHASE_ORDER,
    Phase,
    PhaseFailure,
    PhaseReport,
    ReconciliationDriver,
    ReconciliationResult,
)
from .mutators import (
    DEFAULT_BATCH_SIZE,
    MAX_BATCH_SIZE,
    add_missing_links_on_constrained_businesses,
    check_batch_size,
    remove_excluded_links_on_constrained_businesses,
    remove_links_on_unconstrained_businesses,
)
from .predicates import (
    has_excluded_links_on_constrained_businesses,
    has_links_on_unconstrained_businesses,
    has_missing_links_on_constrained_businesses,
)

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "MAX_BATCH_SIZE",
    "PHASE_ORDER",
    "Phase",
    "PhaseFailure",
    "PhaseReport",
    "ReconciliationDriver",
    "ReconciliationResult",
    "add_missing_links_on_constrained_businesses",
    "check_batch_size",
    "has_excluded_links_on_constrained_businesses",
    "has_links_on_unconstrained_businesses",
    "has_missing_links_on_constrained_businesses",
    "remove_excluded_links_on_constrained_businesses",
    "remove_links_on_unconstrained_businesses",
]
