"""SPARQL endpoint configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, optional_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SPARQL_ENDPOINT = "http://database:8890/sparql"
DEFAULT_SPARQL_TIMEOUT_SECONDS = 60.0
SPARQL_RESULTS_JSON = "application/sparql-results+json"


@dataclass(frozen=True, slots=True)
class SparqlConfig:
    """Holds the endpoints and client settings for the shared triplestore."""

    query_endpoint: str
    update_endpoint: str
    resilience: ResilienceConfig


def _request_ratelimit() -> RateLimit | None:
    """Read ``SPARQL_MAX_REQUESTS_PER_SECOND``; unset or ``0`` means unlimited."""

    max_calls = env_int("SPARQL_MAX_REQUESTS_PER_SECOND", 0)
    if max_calls < 0:
        raise ConfigurationError("SPARQL_MAX_REQUESTS_PER_SECOND must not be negative")
    if max_calls == 0:
        return None
    return RateLimit(max_calls=max_calls, per_seconds=1.0)


def get_sparql_config(*, resilience: ResilienceConfig | None = None) -> SparqlConfig:
    query_endpoint = optional_env_var("MU_SPARQL_ENDPOINT", DEFAULT_SPARQL_ENDPOINT)
    update_endpoint = optional_env_var("MU_SPARQL_UPDATE_ENDPOINT", query_endpoint)
    timeout = env_float("SPARQL_TIMEOUT_SECONDS", DEFAULT_SPARQL_TIMEOUT_SECONDS)
    if timeout <= 0:
        raise ConfigurationError("SPARQL_TIMEOUT_SECONDS must be positive")

    return SparqlConfig(
        query_endpoint=query_endpoint,
        update_endpoint=update_endpoint,
        resilience=resilience
        or ResilienceConfig(
            name="sparql",
            timeout_seconds=timeout,
            retry=RetryPolicy(),
            ratelimit=_request_ratelimit(),
            default_headers={"Accept": SPARQL_RESULTS_JSON},
        ),
    )
