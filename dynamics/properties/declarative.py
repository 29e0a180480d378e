"""Declarative dynamic-property setup.

Scanning happens once per concrete type and produces an accessor plan of
`(name, fget, fset)` entries. The plan is bound to each new instance by
wrapping the unbound accessors in closures over that instance and defining
one bag entry per member.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Protocol

from dynamics.api.errors import DuplicatePropertyError, InvalidDynamicPropertyError
from dynamics.api.markers import HasDynamicProperties, is_dynamic_property
from dynamics.api.properties import NO_VALUE, Getter, PropertyValue, Setter
from dynamics.api.setup import SetupRoutine, SetupService

_MISSING = object()


class DynamicPropertyOwner(Protocol):
    """Surface a setup routine needs from the instance it populates."""

    def define(
        self,
        name: str,
        getter: Getter | None = None,
        setter: Setter | None = None,
        *,
        use_initial_value: bool = False,
        initial_value: PropertyValue | None = NO_VALUE,
    ) -> None: ...

    def has(self, name: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class AccessorPlan:
    """Unbound accessor pair for one declared member."""

    name: str
    fget: Callable[[object], PropertyValue] | None
    fset: Callable[[object, PropertyValue], None] | None


def _iter_declared_members(owner_type: type) -> Iterator[tuple[str, object]]:
    seen: set[str] = set()
    for klass in owner_type.__mro__:
        for name, member in klass.__dict__.items():
            if name in seen:
                continue
            seen.add(name)
            yield name, member


def _plan_entry(name: str, member: property) -> AccessorPlan:
    return AccessorPlan(name=name, fget=member.fget, fset=member.fset)


def build_accessor_plan(owner_type: type, marker: HasDynamicProperties) -> tuple[AccessorPlan, ...]:
    """Select members for owner_type according to marker.

    Without an allow-list only public marked members are selected; an
    allow-list may name private members explicitly.
    """
    if not marker.has_name_list:
        return tuple(
            _plan_entry(name, member)
            for name, member in _iter_declared_members(owner_type)
            if not name.startswith("_") and is_dynamic_property(member)
        )
    entries: list[AccessorPlan] = []
    listed: set[str] = set()
    for name in marker.names or ():
        if name in listed:
            raise InvalidDynamicPropertyError(owner_type, name, "listed more than once")
        listed.add(name)
        member = inspect.getattr_static(owner_type, name, _MISSING)
        if member is _MISSING:
            raise InvalidDynamicPropertyError(owner_type, name, "no such member")
        if not is_dynamic_property(member):
            raise InvalidDynamicPropertyError(owner_type, name, "member is not marked with dynamic_property")
        entries.append(_plan_entry(name, member))
    return tuple(entries)


def _bind_getter(instance: object, fget: Callable[[object], PropertyValue]) -> Getter:
    def getter() -> PropertyValue:
        return fget(instance)

    return getter


def _bind_setter(instance: object, fset: Callable[[object, PropertyValue], None]) -> Setter:
    def setter(value: PropertyValue) -> None:
        fset(instance, value)

    return setter


def bind_accessor_plan(instance: DynamicPropertyOwner, plan: tuple[AccessorPlan, ...]) -> None:
    """Define one delegate-backed property per plan entry on instance."""
    for entry in plan:
        if instance.has(entry.name):
            raise DuplicatePropertyError(instance, entry.name)
    for entry in plan:
        instance.define(
            entry.name,
            _bind_getter(instance, entry.fget) if entry.fget is not None else None,
            _bind_setter(instance, entry.fset) if entry.fset is not None else None,
        )


def add_dynamic_property(instance: DynamicPropertyOwner, name: str) -> None:
    """Bind one declared property of instance's type by name."""
    owner_type = type(instance)
    member = inspect.getattr_static(owner_type, name, _MISSING)
    if member is _MISSING:
        raise InvalidDynamicPropertyError(owner_type, name, "no such member")
    if not isinstance(member, property):
        raise InvalidDynamicPropertyError(owner_type, name, "member is not a property")
    bind_accessor_plan(instance, (_plan_entry(name, member),))


def setup_dynamic_properties(owner_type: type, marker: object) -> SetupRoutine:
    """Once-per-type handler for the `HasDynamicProperties` marker."""
    if not isinstance(marker, HasDynamicProperties):
        raise TypeError(f"unexpected marker for dynamic property setup: {marker!r}")
    plan = build_accessor_plan(owner_type, marker)

    def apply(instance: object) -> None:
        bind_accessor_plan(instance, plan)  # type: ignore[arg-type]

    return apply


def register_dynamic_property_handler(service: SetupService) -> None:
    """Register the dynamic-property handler on service."""
    service.register_handler(HasDynamicProperties, setup_dynamic_properties)
