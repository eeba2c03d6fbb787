"""Pydantic models describing SPARQL JSON result payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SparqlBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResultHead(SparqlBaseModel):
    link: list[str] = Field(default_factory=list)


class AskResponse(SparqlBaseModel):
    head: ResultHead = Field(default_factory=ResultHead)
    boolean: bool
