"""Public dynamics logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DynamicsLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: DynamicsLoggingConfig) -> None:
    """Configure output of the `dynamics` logger hierarchy."""
    from dynamics.runtime.logging import configure_dynamics_logging

    configure_dynamics_logging(config)
