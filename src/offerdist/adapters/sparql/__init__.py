"""Public interface for the SPARQL endpoint adapter."""

from __future__ import annotations

from .client import SparqlGraphStore
from .rendering import render_ask, render_select, render_template_update, render_update
from .schema import AskResponse

__all__ = [
    "AskResponse",
    "SparqlGraphStore",
    "render_ask",
    "render_select",
    "render_template_update",
    "render_update",
]
