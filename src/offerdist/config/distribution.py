"""Reconciliation tuning values."""

from __future__ import annotations

from dataclasses import dataclass

from offerdist.domain.distribution.mutators import (
    DEFAULT_BATCH_SIZE,
    MAX_BATCH_SIZE,
    check_batch_size,
)

from .env import env_int
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class DistributionConfig:
    batch_size: int = DEFAULT_BATCH_SIZE


def validate_batch_size(value: int) -> int:
    try:
        return check_batch_size(value)
    except ValueError as exc:
        raise ConfigurationError(f"DISTRIBUTION_BATCH_SIZE is invalid: {exc}") from exc


def get_distribution_config() -> DistributionConfig:
    batch_size = env_int("DISTRIBUTION_BATCH_SIZE", DEFAULT_BATCH_SIZE)
    return DistributionConfig(batch_size=validate_batch_size(batch_size))
