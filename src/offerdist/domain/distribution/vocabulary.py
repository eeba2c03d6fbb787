"""Namespaces and predicates used by the offering distribution queries."""

from __future__ import annotations

from typing import Final

EXT: Final[str] = "http://mu.semte.ch/vocabularies/ext/"
GR: Final[str] = "http://purl.org/goodrelations/v1#"
SCHEMA: Final[str] = "http://schema.org/"
VEEAKKER: Final[str] = "http://veeakker.be/vocabularies/shop/"
SKOS: Final[str] = "http://www.w3.org/2004/02/skos/core#"
DCT: Final[str] = "http://purl.org/dc/terms/"
MU: Final[str] = "http://mu.semte.ch/vocabularies/core/"

NAMESPACES: Final[dict[str, str]] = {
    "ext": EXT,
    "gr": GR,
    "schema": SCHEMA,
    "veeakker": VEEAKKER,
    "skos": SKOS,
    "dct": DCT,
    "mu": MU,
}

BUSINESS_ENTITY: Final[str] = GR + "BusinessEntity"
OFFERING: Final[str] = GR + "Offering"
AVAILABLE_AT_OR_FROM: Final[str] = GR + "availableAtOrFrom"
INCLUDES_OBJECT: Final[str] = GR + "includesObject"
TYPE_OF_GOOD: Final[str] = GR + "typeOfGood"
HAS_PRODUCT: Final[str] = VEEAKKER + "hasProduct"
BROADER: Final[str] = SKOS + "broader"
DISALLOWED_PRODUCT_GROUP: Final[str] = EXT + "disallowedProductGroup"


def sparql_prefixes() -> str:
    """Render the ``PREFIX`` block shared by every query and update."""

    return "\n".join(f"PREFIX {prefix}: <{iri}>" for prefix, iri in NAMESPACES.items())
