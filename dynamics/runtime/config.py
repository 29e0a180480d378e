"""Dynamic-property runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DynamicsConfig:
    """Immutable dynamic-property runtime configuration."""

    log_level: str
    setup_trace_enabled: bool = False
    warn_empty_delegates: bool = True


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with dynamics-prefixed override."""
    value = os.getenv("DYNAMICS_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default


def load_dynamics_config() -> DynamicsConfig:
    """Load immutable configuration from env vars."""
    return DynamicsConfig(
        log_level=resolve_log_level_name(),
        setup_trace_enabled=_flag("DYNAMICS_SETUP_TRACE", False),
        warn_empty_delegates=_flag("DYNAMICS_WARN_EMPTY_DELEGATES", True),
    )


def enabled_setup_trace() -> bool:
    return load_dynamics_config().setup_trace_enabled
