"""Declarative dynamic-property marker vocabulary."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar, overload

TOwner = TypeVar("TOwner", bound=type)
TMarker = TypeVar("TMarker")

_MARKERS_ATTR = "__dynamics_markers__"


@dataclass(frozen=True, slots=True)
class HasDynamicProperties:
    """Class-level marker; `names` is an explicit allow-list or None for all marked members."""

    names: tuple[str, ...] | None = None

    @property
    def has_name_list(self) -> bool:
        return self.names is not None


class dynamic_property(property):
    """Member-level marker used exactly like the builtin `property`.

    >>> class Sprite(DynamicPropertyCollection):
    ...     @dynamic_property
    ...     def alpha(self) -> float:
    ...         return self._alpha
    ...
    ...     @alpha.setter
    ...     def alpha(self, value: float) -> None:
    ...         self._alpha = value
    """


def is_dynamic_property(member: object) -> bool:
    """Return whether member carries the member-level marker."""
    return isinstance(member, dynamic_property)


def mark_dynamic(member: property) -> dynamic_property:
    """Return a marked copy of an existing property."""
    if isinstance(member, dynamic_property):
        return member
    if not isinstance(member, property):
        raise TypeError(f"only properties can be marked dynamic: {member!r}")
    return dynamic_property(member.fget, member.fset, member.fdel, member.__doc__)


def attach_marker(owner_type: TOwner, marker: object) -> TOwner:
    """Attach class-level marker; one marker per kind per class."""
    own = dict(owner_type.__dict__.get(_MARKERS_ATTR, {}))
    own[type(marker)] = marker
    setattr(owner_type, _MARKERS_ATTR, own)
    return owner_type


def find_marker(owner_type: type, kind: type[TMarker]) -> TMarker | None:
    """Return nearest marker of kind along the MRO."""
    for klass in owner_type.__mro__:
        markers = klass.__dict__.get(_MARKERS_ATTR)
        if markers and kind in markers:
            return markers[kind]
    return None


@overload
def has_dynamic_properties(owner_type: TOwner, /) -> TOwner: ...


@overload
def has_dynamic_properties(*names: str) -> Callable[[TOwner], TOwner]: ...


def has_dynamic_properties(*names: str | type) -> type | Callable[[type], type]:
    """Mark a class as exposing dynamic properties.

    Bare use exposes every member marked with `dynamic_property`; passing
    names restricts setup to exactly that allow-list.
    """
    if len(names) == 1 and isinstance(names[0], type):
        return attach_marker(names[0], HasDynamicProperties())
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"dynamic property names must be non-empty strings: {name!r}")
    marker = HasDynamicProperties(names=tuple(names) if names else None)

    def _decorate(owner_type: type) -> type:
        return attach_marker(owner_type, marker)

    return _decorate
