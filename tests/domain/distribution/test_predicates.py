from __future__ import annotations

from typing import TYPE_CHECKING

from offerdist.domain.distribution import (
    has_excluded_links_on_constrained_businesses,
    has_links_on_unconstrained_businesses,
    has_missing_links_on_constrained_businesses,
)

if TYPE_CHECKING:
    from offerdist.adapters.rdflib_store import RdflibGraphStore
    from tests.support.shop_graph import ShopGraph


def test_empty_store_has_no_inconsistencies(store: RdflibGraphStore) -> None:
    assert not has_links_on_unconstrained_businesses(store)
    assert not has_missing_links_on_constrained_businesses(store)
    assert not has_excluded_links_on_constrained_businesses(store)


def test_link_on_unconstrained_business_is_detected(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    business = shop.business("b1")
    offering = shop.offering("o1", group=shop.group("g1"))
    assert not has_links_on_unconstrained_businesses(store)

    shop.link(offering, business)

    assert has_links_on_unconstrained_businesses(store)


def test_unconstrained_check_ignores_constrained_businesses(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    business = shop.business("b1", disallowed=[shop.group("g1")])
    shop.link(shop.offering("o1", group=shop.group("g2")), business)

    assert not has_links_on_unconstrained_businesses(store)


def test_missing_link_on_constrained_business_is_detected(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    business = shop.business("b2", disallowed=[shop.group("g1")])
    offering = shop.offering("o3", group=shop.group("g2"))

    assert has_missing_links_on_constrained_businesses(store)

    shop.link(offering, business)

    assert not has_missing_links_on_constrained_businesses(store)


def test_excluded_offering_is_not_reported_missing(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    disallowed = shop.group("g1")
    shop.business("b2", disallowed=[disallowed])
    shop.offering("o4", group=disallowed)

    assert not has_missing_links_on_constrained_businesses(store)


def test_unconstrained_business_never_misses_links(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    shop.business("b1")
    shop.offering("o1", group=shop.group("g1"))

    assert not has_missing_links_on_constrained_businesses(store)


def test_excluded_link_on_constrained_business_is_detected(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    disallowed = shop.group("g1")
    business = shop.business("b3", disallowed=[disallowed])
    offering = shop.offering("o4", group=disallowed)
    assert not has_excluded_links_on_constrained_businesses(store)

    shop.link(offering, business)

    assert has_excluded_links_on_constrained_businesses(store)


def test_link_to_child_group_of_disallowed_group_is_excluded(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    parent = shop.group("meat")
    child = shop.group("pork", broader=parent)
    business = shop.business("b3", disallowed=[parent])
    shop.link(shop.offering("o5", group=child), business)

    assert has_excluded_links_on_constrained_businesses(store)


def test_link_to_grandchild_group_of_disallowed_group_is_kept(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    root = shop.group("food")
    middle = shop.group("meat", broader=root)
    leaf = shop.group("pork", broader=middle)
    business = shop.business("b3", disallowed=[root])
    shop.link(shop.offering("o6", group=leaf), business)

    assert not has_excluded_links_on_constrained_businesses(store)


def test_link_to_parent_group_of_disallowed_group_is_kept(
    shop: ShopGraph, store: RdflibGraphStore
) -> None:
    parent = shop.group("meat")
    child = shop.group("pork", broader=parent)
    business = shop.business("b3", disallowed=[child])
    shop.link(shop.offering("o7", group=parent), business)

    assert not has_excluded_links_on_constrained_businesses(store)
