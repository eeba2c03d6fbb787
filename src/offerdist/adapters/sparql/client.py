"""Graph store adapter speaking the SPARQL 1.1 protocol over HTTP."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Self

import httpx
from pydantic import ValidationError

from offerdist.adapters.http_resilience import ResilienceConfig, ResilientClient
from offerdist.config.sparql import SparqlConfig, get_sparql_config
from offerdist.domain.ports.graph_store import (
    GraphStore,
    StoreQueryFailedError,
    StoreTimeoutError,
    StoreUnavailableError,
)

from .rendering import render_ask, render_update
from .schema import AskResponse

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from offerdist.domain.ports.graph_store import Mutation

log = getLogger(__name__)

UNAVAILABLE_STATUSES = frozenset({502, 503, 504})


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class SparqlGraphStore:
    """Blocking :class:`GraphStore` backed by the async resilient client.

    The client lives on a private event loop for the lifetime of the store so the
    rate limiter and the connection pool are shared by every request of a run.
    """

    config: SparqlConfig = field(default_factory=get_sparql_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _runner: asyncio.Runner | None = field(default=None, init=False, repr=False)
    _client: ResilientClient | None = field(default=None, init=False, repr=False)

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def open(self) -> None:
        self._session()

    def close(self) -> None:
        runner, client = self._runner, self._client
        self._runner = None
        self._client = None
        if runner is None:
            return
        try:
            if client is not None:
                runner.run(client.aclose())
        finally:
            runner.close()

    def ask(self, pattern: str) -> bool:
        response = self._execute(self.config.query_endpoint, {"query": render_ask(pattern)})
        try:
            return AskResponse.model_validate(response.json()).boolean
        except (ValueError, ValidationError) as exc:
            raise StoreQueryFailedError(f"Unexpected ASK response payload: {exc}") from exc

    def mutate(self, mutation: Mutation) -> None:
        self._execute(self.config.update_endpoint, {"update": render_update(mutation)})

    def _session(self) -> tuple[asyncio.Runner, ResilientClient]:
        if self._runner is None or self._client is None:
            self._runner = asyncio.Runner()
            self._client = self.client_factory(self.config.resilience)
        return self._runner, self._client

    def _execute(self, url: str, form: dict[str, str]) -> httpx.Response:
        runner, client = self._session()
        return runner.run(self._post(client, url, form))

    async def _post(
        self, client: ResilientClient, url: str, form: dict[str, str]
    ) -> httpx.Response:
        log.debug("Sending SPARQL request to %s:\n%s", url, next(iter(form.values())))
        try:
            response = await client.post(url, data=form)
        except httpx.TimeoutException as exc:
            raise StoreTimeoutError(f"SPARQL endpoint {url} timed out") from exc
        except httpx.TransportError as exc:
            raise StoreUnavailableError(f"SPARQL endpoint {url} unreachable: {exc}") from exc

        if response.is_success:
            return response
        message = f"SPARQL endpoint {url} answered {response.status_code}: {response.text[:500]}"
        log.error(message)
        if response.status_code in UNAVAILABLE_STATUSES:
            raise StoreUnavailableError(message)
        raise StoreQueryFailedError(message)


if TYPE_CHECKING:
    _store_check: GraphStore = SparqlGraphStore()
