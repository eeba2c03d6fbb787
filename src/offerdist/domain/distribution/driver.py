"""Convergence loops bringing offering availability in line with business rules.

Each phase pairs an existence check with a bounded rewrite and repeats
``check -> fix`` until the check comes back false. Phases run strictly one after
the other in :data:`PHASE_ORDER`; a store failure stops the run on the spot and
is reported back instead of raised, so callers can tell which phase broke.
Every step is re-derived from the current store content, which makes re-running
a failed or interrupted reconciliation safe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final, Protocol

from offerdist.domain.ports.graph_store import GraphStoreError

from .mutators import (
    DEFAULT_BATCH_SIZE,
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

if TYPE_CHECKING:
    from collections.abc import Mapping

    from offerdist.domain.ports.graph_store import GraphStore

log = getLogger(__name__)


class Phase(StrEnum):
    """One check/fix convergence loop."""

    CLEANUP_UNCONSTRAINED = "cleanup-unconstrained"
    FILL_CONSTRAINED = "fill-constrained"
    TRIM_CONSTRAINED = "trim-constrained"


class FixStep(Protocol):
    def __call__(self, store: GraphStore, *, batch_size: int = ...) -> None: ...


@dataclass(frozen=True, slots=True)
class PhaseSteps:
    check: Callable[[GraphStore], bool]
    fix: FixStep


PHASE_ORDER: Final[tuple[Phase, ...]] = (
    Phase.CLEANUP_UNCONSTRAINED,
    Phase.FILL_CONSTRAINED,
    Phase.TRIM_CONSTRAINED,
)

PHASE_STEPS: Final[Mapping[Phase, PhaseSteps]] = {
    Phase.CLEANUP_UNCONSTRAINED: PhaseSteps(
        check=has_links_on_unconstrained_businesses,
        fix=remove_links_on_unconstrained_businesses,
    ),
    Phase.FILL_CONSTRAINED: PhaseSteps(
        check=has_missing_links_on_constrained_businesses,
        fix=add_missing_links_on_constrained_businesses,
    ),
    Phase.TRIM_CONSTRAINED: PhaseSteps(
        check=has_excluded_links_on_constrained_businesses,
        fix=remove_excluded_links_on_constrained_businesses,
    ),
}


@dataclass(frozen=True, slots=True)
class PhaseReport:
    """A phase that converged, with the number of fix batches it applied."""

    phase: Phase
    rounds: int


@dataclass(frozen=True, slots=True)
class PhaseFailure:
    """The phase in progress when the store failed, and the store error."""

    phase: Phase
    error: GraphStoreError
    rounds: int = 0


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """Outcome of a driver invocation."""

    reports: tuple[PhaseReport, ...] = field(default_factory=tuple)
    failure: PhaseFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @property
    def rounds(self) -> int:
        completed = sum(report.rounds for report in self.reports)
        return completed + (self.failure.rounds if self.failure else 0)

    def raise_for_failure(self) -> None:
        if self.failure is not None:
            raise self.failure.error


@dataclass(slots=True)
class ReconciliationDriver:
    """Run distribution phases against ``store`` until their checks come back false."""

    store: GraphStore
    batch_size: int = DEFAULT_BATCH_SIZE

    def __post_init__(self) -> None:
        check_batch_size(self.batch_size)

    def run_full_reconciliation(self) -> ReconciliationResult:
        return self._run(PHASE_ORDER)

    def run_phase(self, phase: Phase | str) -> ReconciliationResult:
        return self._run((Phase(phase),))

    def _run(self, phases: tuple[Phase, ...]) -> ReconciliationResult:
        reports: list[PhaseReport] = []
        for phase in phases:
            rounds = 0
            log.info("Starting phase %s", phase)
            steps = PHASE_STEPS[phase]
            try:
                while steps.check(self.store):
                    steps.fix(self.store, batch_size=self.batch_size)
                    rounds += 1
                    log.debug("Phase %s applied batch %s", phase, rounds)
            except GraphStoreError as exc:
                log.error("Phase %s failed after %s batches: %s", phase, rounds, exc)  # noqa: TRY400
                return ReconciliationResult(
                    reports=tuple(reports),
                    failure=PhaseFailure(phase=phase, error=exc, rounds=rounds),
                )
            log.info("Phase %s converged after %s batches", phase, rounds)
            reports.append(PhaseReport(phase=phase, rounds=rounds))
        return ReconciliationResult(reports=tuple(reports))
