from __future__ import annotations

import pytest

from offerdist.adapters.rdflib_store import RdflibGraphStore
from tests.support.shop_graph import ShopGraph


@pytest.fixture
def shop() -> ShopGraph:
    return ShopGraph()


@pytest.fixture
def store(shop: ShopGraph) -> RdflibGraphStore:
    return RdflibGraphStore(graph=shop.graph)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MU_SPARQL_ENDPOINT",
        "MU_SPARQL_UPDATE_ENDPOINT",
        "SPARQL_TIMEOUT_SECONDS",
        "SPARQL_MAX_REQUESTS_PER_SECOND",
        "DISTRIBUTION_BATCH_SIZE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
