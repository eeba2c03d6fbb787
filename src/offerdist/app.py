"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import ExitStack
from logging import getLogger
from typing import TYPE_CHECKING

from offerdist.adapters.sparql import SparqlGraphStore
from offerdist.config import get_distribution_config, get_sparql_config
from offerdist.domain.distribution import Phase, ReconciliationDriver

if TYPE_CHECKING:
    from offerdist.domain.distribution import ReconciliationResult
    from offerdist.domain.ports.graph_store import GraphStore


log = getLogger(__name__)


def distribute_offerings(
    phase: Phase | None = None,
    *,
    store: GraphStore | None = None,
    batch_size: int | None = None,
) -> ReconciliationResult:
    """Reconcile offering availability, either fully or for a single ``phase``.

    Without an explicit ``store`` a :class:`SparqlGraphStore` is built from the
    environment and closed again once the run is over.
    """

    effective_batch_size = (
        batch_size if batch_size is not None else get_distribution_config().batch_size
    )
    with ExitStack() as stack:
        effective_store = store
        if effective_store is None:
            effective_store = stack.enter_context(SparqlGraphStore(config=get_sparql_config()))

        driver = ReconciliationDriver(store=effective_store, batch_size=effective_batch_size)
        if phase is None:
            log.info("Starting distribution of offerings' locations")
            result = driver.run_full_reconciliation()
        else:
            log.info("Starting distribution phase %s", phase)
            result = driver.run_phase(phase)

    if result.succeeded:
        log.info("Location distribution complete: %s batches applied", result.rounds)
    return result
