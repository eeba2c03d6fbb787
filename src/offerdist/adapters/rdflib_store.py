"""Graph store adapter evaluating SPARQL against an in-process ``rdflib`` graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from rdflib import Graph
from rdflib.plugins.sparql import prepareUpdate

from offerdist.adapters.sparql.rendering import (
    render_ask,
    render_select,
    render_template_update,
)
from offerdist.domain.distribution.vocabulary import NAMESPACES
from offerdist.domain.ports.graph_store import GraphStore, StoreQueryFailedError

if TYPE_CHECKING:
    from pathlib import Path

    from offerdist.domain.ports.graph_store import Mutation

log = getLogger(__name__)

TURTLE = "turtle"


def _bound_graph() -> Graph:
    graph = Graph()
    for prefix, iri in NAMESPACES.items():
        graph.bind(prefix, iri)
    return graph


@dataclass(slots=True)
class RdflibGraphStore:
    """:class:`GraphStore` over a local graph, for offline runs and tests.

    A mutation whose selection or templates fail to parse leaves the graph
    untouched.
    """

    graph: Graph = field(default_factory=_bound_graph)

    @classmethod
    def from_file(cls, path: Path, *, rdf_format: str = TURTLE) -> RdflibGraphStore:
        graph = _bound_graph()
        graph.parse(path, format=rdf_format)
        log.info("Loaded %s triples from %s", len(graph), path)
        return cls(graph=graph)

    def save(self, path: Path, *, rdf_format: str = TURTLE) -> None:
        self.graph.serialize(destination=path, format=rdf_format)
        log.info("Wrote %s triples to %s", len(self.graph), path)

    def ask(self, pattern: str) -> bool:
        query = render_ask(pattern)
        try:
            result = self.graph.query(query)
        except Exception as exc:  # noqa: BLE001
            raise StoreQueryFailedError(f"Query rejected: {exc}") from exc
        return bool(result.askAnswer)

    def mutate(self, mutation: Mutation) -> None:
        # Rows are materialised before any template is applied so the selection
        # never observes its own deletes or inserts. Each row is handed to the
        # templates as initial bindings, which keeps blank nodes intact.
        try:
            template = prepareUpdate(render_template_update(mutation))
            rows = [row.asdict() for row in self.graph.query(render_select(mutation))]
            for bindings in rows:
                self.graph.update(template, initBindings=bindings)
        except Exception as exc:  # noqa: BLE001
            raise StoreQueryFailedError(f"Update rejected: {exc}") from exc
        log.debug("Applied mutation to %s binding rows", len(rows))


if TYPE_CHECKING:
    _store_check: GraphStore = RdflibGraphStore()
