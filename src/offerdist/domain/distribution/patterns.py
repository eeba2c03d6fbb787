"""SPARQL group patterns describing each kind of distribution inconsistency.

Every pattern binds ``?business`` and ``?offering``. The same text backs both the
existence check of a phase and the ``WHERE`` of its batch rewrite, so the fix
step always re-selects its pairs from the store as it is at that moment.
"""

from __future__ import annotations

from typing import Final

LINK_TEMPLATE: Final[str] = "?offering gr:availableAtOrFrom ?business ."

# One optional broader hop: a group and its direct children are excluded,
# grandchildren and parents are not.
EXCLUSION_PATH: Final[str] = (
    "gr:includesObject/gr:typeOfGood/^veeakker:hasProduct/skos:broader?"
    "/^ext:disallowedProductGroup"
)


def indent(block: str, depth: int = 1) -> str:
    prefix = "  " * depth
    return "\n".join(prefix + line if line else line for line in block.splitlines())


def unconstrained_business() -> str:
    return "\n".join(
        (
            "?business a gr:BusinessEntity .",
            "FILTER NOT EXISTS {",
            "  ?business ext:disallowedProductGroup ?anyGroup .",
            "}",
        )
    )


def constrained_business() -> str:
    """Bind the constrained businesses first so exclusion matching never sees the rest."""

    return "\n".join(
        (
            "{",
            "  SELECT DISTINCT ?business WHERE {",
            "    ?business a gr:BusinessEntity ;",
            "      ext:disallowedProductGroup ?anyGroup .",
            "  }",
            "}",
        )
    )


def offering_is_excluded() -> str:
    return f"?offering {EXCLUSION_PATH} ?business ."


def offering_is_not_excluded() -> str:
    return "\n".join(("FILTER NOT EXISTS {", indent(offering_is_excluded()), "}"))


def link_is_absent() -> str:
    return "\n".join(("FILTER NOT EXISTS {", indent(LINK_TEMPLATE), "}"))


def links_on_unconstrained_businesses() -> str:
    """Offerings linked to a business that declares no exclusion rules."""

    return "\n".join((unconstrained_business(), LINK_TEMPLATE))


def missing_links_on_constrained_businesses() -> str:
    """Offerings a constrained business allows but is not yet linked to."""

    return "\n".join(
        (
            constrained_business(),
            "?offering a gr:Offering .",
            link_is_absent(),
            offering_is_not_excluded(),
        )
    )


def excluded_links_on_constrained_businesses() -> str:
    """Offerings linked to a constrained business whose rules exclude them."""

    return "\n".join(
        (
            constrained_business(),
            "?offering a gr:Offering .",
            LINK_TEMPLATE,
            offering_is_excluded(),
        )
    )
