from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from offerdist.domain.distribution import (
    add_missing_links_on_constrained_businesses,
    remove_excluded_links_on_constrained_businesses,
    remove_links_on_unconstrained_businesses,
)
from offerdist.domain.distribution.patterns import LINK_TEMPLATE
from tests.support.stores import ScriptedGraphStore

if TYPE_CHECKING:
    from offerdist.adapters.rdflib_store import RdflibGraphStore
    from tests.support.shop_graph import ShopGraph


def test_remove_links_on_unconstrained_businesses_respects_batch_size(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    business = shop.business("b1")
    for index in range(5):
        shop.link(shop.offering(f"o{index}"), business)

    remove_links_on_unconstrained_businesses(store, batch_size=2)

    assert len(shop.links()) == 3


def test_remove_links_on_unconstrained_businesses_keeps_constrained_links(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    unconstrained = shop.business("b1")
    constrained = shop.business("b2", disallowed=[shop.group("g1")])
    offering = shop.offering("o1", group=shop.group("g2"))
    shop.link(offering, unconstrained)
    shop.link(offering, constrained)

    remove_links_on_unconstrained_businesses(store)

    assert shop.links() == {(offering, constrained)}


def test_add_missing_links_inserts_only_allowed_pairs(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    disallowed = shop.group("g1")
    business = shop.business("b2", disallowed=[disallowed])
    allowed = shop.offering("o3", group=shop.group("g2"))
    shop.offering("o4", group=disallowed)
    shop.business("b1")

    add_missing_links_on_constrained_businesses(store)

    assert shop.links() == {(allowed, business)}


def test_add_missing_links_respects_batch_size(shop: ShopGraph, store: RdflibGraphStore) -> None:
    shop.business("b2", disallowed=[shop.group("g1")])
    for index in range(7):
        shop.offering(f"o{index}", group=shop.group("g2"))

    add_missing_links_on_constrained_businesses(store, batch_size=3)

    assert len(shop.links()) == 3


def test_remove_excluded_links_leaves_allowed_links(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    disallowed = shop.group("g1")
    business = shop.business("b3", disallowed=[disallowed])
    excluded = shop.offering("o4", group=disallowed)
    allowed = shop.offering("o5", group=shop.group("g2"))
    shop.link(excluded, business)
    shop.link(allowed, business)

    remove_excluded_links_on_constrained_businesses(store)

    assert shop.links() == {(allowed, business)}


@pytest.mark.parametrize("batch_size", [0, -1, 101])
def test_batch_size_outside_bounds_is_rejected(batch_size: int) -> None:
    store = ScriptedGraphStore()

    with pytest.raises(ValueError, match="Batch size"):
        remove_links_on_unconstrained_businesses(store, batch_size=batch_size)

    assert store.mutations == []


def test_mutations_rewrite_only_the_availability_link() -> None:
    store = ScriptedGraphStore()

    remove_links_on_unconstrained_businesses(store)
    add_missing_links_on_constrained_businesses(store)
    remove_excluded_links_on_constrained_businesses(store, batch_size=10)

    first, second, third = store.mutations
    assert (first.delete, first.insert, first.limit) == (LINK_TEMPLATE, None, 100)
    assert (second.delete, second.insert, second.limit) == (None, LINK_TEMPLATE, 100)
    assert (third.delete, third.insert, third.limit) == (LINK_TEMPLATE, None, 10)
    assert {mutation.bindings for mutation in store.mutations} == {("business", "offering")}
