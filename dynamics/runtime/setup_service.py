"""Type-setup memoization service implementation."""

from __future__ import annotations

import logging
import threading

from dynamics.api.markers import find_marker
from dynamics.api.setup import SetupHandler, SetupRoutine, SetupService
from dynamics.runtime.config import enabled_setup_trace
from dynamics.runtime.logging import get_dynamics_logger, setup_dynamics_logging

_LOG = get_dynamics_logger("setup")
_DEFAULT_SERVICE: RuntimeSetupService | None = None
_DEFAULT_LOCK = threading.Lock()


class RuntimeSetupService(SetupService):
    """Setup cache keyed by concrete type.

    Handlers run once per type and return a routine; the routine runs for
    every instance handed to `handle`. Failed scans are not cached.
    """

    def __init__(self, *, trace_enabled: bool | None = None) -> None:
        self._handlers: dict[type, SetupHandler] = {}
        self._routines: dict[type, tuple[SetupRoutine, ...]] = {}
        self._lock = threading.RLock()
        self._trace_enabled = enabled_setup_trace() if trace_enabled is None else trace_enabled

    def register_handler(self, marker_kind: type, handler: SetupHandler) -> None:
        with self._lock:
            self._handlers[marker_kind] = handler
            self._routines.clear()

    def handle(self, instance: object) -> None:
        owner_type = type(instance)
        routines = self._routines.get(owner_type)
        if routines is None:
            routines = self._setup_type(owner_type)
        for routine in routines:
            routine(instance)

    def is_setup(self, owner_type: type) -> bool:
        return owner_type in self._routines

    def clear(self) -> None:
        with self._lock:
            self._routines.clear()

    def setup_types(self) -> tuple[type, ...]:
        """Return every type that completed setup."""
        with self._lock:
            return tuple(self._routines)

    def _setup_type(self, owner_type: type) -> tuple[SetupRoutine, ...]:
        with self._lock:
            cached = self._routines.get(owner_type)
            if cached is not None:
                return cached
            collected: list[SetupRoutine] = []
            for marker_kind, handler in tuple(self._handlers.items()):
                marker = find_marker(owner_type, marker_kind)
                if marker is None:
                    continue
                collected.append(handler(owner_type, marker))
            routines = tuple(collected)
            self._routines[owner_type] = routines
        _LOG.log(
            logging.INFO if self._trace_enabled else logging.DEBUG,
            "type_setup_complete type=%s.%s routines=%d",
            owner_type.__module__,
            owner_type.__qualname__,
            len(routines),
        )
        return routines


def default_setup_service() -> RuntimeSetupService:
    """Return lazily created process-wide service with dynamic-property handler."""
    global _DEFAULT_SERVICE

    if _DEFAULT_SERVICE is not None:
        return _DEFAULT_SERVICE
    with _DEFAULT_LOCK:
        if _DEFAULT_SERVICE is None:
            from dynamics.properties.declarative import register_dynamic_property_handler

            setup_dynamics_logging()
            service = RuntimeSetupService()
            register_dynamic_property_handler(service)
            _DEFAULT_SERVICE = service
    return _DEFAULT_SERVICE
