"""Public type-setup memoization API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

SetupRoutine = Callable[[object], None]
SetupHandler = Callable[[type, object], SetupRoutine]


class SetupService(ABC):
    """Runs marker-driven setup scans once per concrete type."""

    @abstractmethod
    def register_handler(self, marker_kind: type, handler: SetupHandler) -> None:
        """Associate a class-marker kind with its once-per-type handler."""

    @abstractmethod
    def handle(self, instance: object) -> None:
        """Scan instance type on first encounter, then apply cached routines to instance."""

    @abstractmethod
    def is_setup(self, owner_type: type) -> bool:
        """Return whether owner_type has completed setup."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every completed type setup."""


def create_setup_service() -> SetupService:
    """Create empty setup service with no handlers registered."""
    from dynamics.runtime.setup_service import RuntimeSetupService

    return RuntimeSetupService()


def create_dynamic_property_setup_service() -> SetupService:
    """Create setup service with the dynamic-property handler registered."""
    from dynamics.properties.declarative import register_dynamic_property_handler

    service = create_setup_service()
    register_dynamic_property_handler(service)
    return service


def default_setup_service() -> SetupService:
    """Return the process-wide setup service."""
    from dynamics.runtime.setup_service import default_setup_service as _default_setup_service

    return _default_setup_service()
