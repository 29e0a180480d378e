"""Dynamics runtime modules."""

from dynamics.runtime.config import DynamicsConfig, load_dynamics_config
from dynamics.runtime.logging import configure_dynamics_logging, get_dynamics_logger, setup_dynamics_logging
from dynamics.runtime.setup_service import RuntimeSetupService, default_setup_service

__all__ = [
    "DynamicsConfig",
    "RuntimeSetupService",
    "configure_dynamics_logging",
    "default_setup_service",
    "get_dynamics_logger",
    "load_dynamics_config",
    "setup_dynamics_logging",
]
