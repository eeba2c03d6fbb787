"""Turn port-level requests into complete SPARQL 1.1 query and update strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from offerdist.domain.distribution.patterns import indent
from offerdist.domain.distribution.vocabulary import sparql_prefixes

if TYPE_CHECKING:
    from offerdist.domain.ports.graph_store import Mutation


def render_ask(pattern: str) -> str:
    return f"{sparql_prefixes()}\n\nASK WHERE {{\n{indent(pattern)}\n}}\n"


def _projection(mutation: Mutation) -> str:
    return " ".join(f"?{name}" for name in mutation.bindings)


def _selection(mutation: Mutation) -> str:
    return "\n".join(
        (
            f"SELECT DISTINCT {_projection(mutation)} WHERE {{",
            indent(mutation.where),
            f"}} LIMIT {mutation.limit}",
        )
    )


def _templates(mutation: Mutation) -> list[str]:
    clauses: list[str] = []
    if mutation.delete is not None:
        clauses.append(f"DELETE {{\n{indent(mutation.delete)}\n}}")
    if mutation.insert is not None:
        clauses.append(f"INSERT {{\n{indent(mutation.insert)}\n}}")
    return clauses


def render_select(mutation: Mutation) -> str:
    """Render the bounded selection of binding rows ``mutation`` applies to."""

    return f"{sparql_prefixes()}\n\n{_selection(mutation)}\n"


def render_update(mutation: Mutation) -> str:
    """Render ``mutation`` as one DELETE/INSERT request over a limited sub-select.

    The ``LIMIT`` sits on a ``SELECT DISTINCT`` of the mutation's bindings so the
    templates are applied to at most ``mutation.limit`` rows per request.
    """

    selection = "\n".join(("{", indent(_selection(mutation)), "}"))
    where = f"WHERE {{\n{indent(selection)}\n}}"
    return "\n".join((sparql_prefixes(), "", *_templates(mutation), where, ""))


def render_template_update(mutation: Mutation) -> str:
    """Render the templates of ``mutation`` over an empty pattern.

    Executed once per selected row with the row passed as initial bindings, so
    the terms never pass through query text.
    """

    return "\n".join((sparql_prefixes(), "", *_templates(mutation), "WHERE {}", ""))
