"""Application configuration helpers."""

from __future__ import annotations

from .distribution import (
    DEFAULT_BATCH_SIZE,
    MAX_BATCH_SIZE,
    DistributionConfig,
    get_distribution_config,
    validate_batch_size,
)
from .env import env_float, env_int, optional_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, resolve_log_level
from .sparql import DEFAULT_SPARQL_ENDPOINT, SparqlConfig, get_sparql_config

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_SPARQL_ENDPOINT",
    "MAX_BATCH_SIZE",
    "ConfigurationError",
    "DistributionConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SparqlConfig",
    "configure_logging",
    "env_float",
    "env_int",
    "get_distribution_config",
    "get_sparql_config",
    "optional_env_var",
    "resolve_log_level",
    "validate_batch_size",
]
