"""Public dynamic-property API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, overload

TValue = TypeVar("TValue")


class PropertyValue(Protocol):
    """Opaque dynamic-property value boundary contract."""


Getter = Callable[[], PropertyValue]
Setter = Callable[[PropertyValue], None]


class _NoValue:
    """Marker for an omitted `initial_value`; `None` is a valid value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE: Any = _NoValue()


class DynamicProperty(Protocol):
    """One named unit of dynamic state."""

    @property
    def readable(self) -> bool:
        """Return whether `read` can succeed."""

    @property
    def writable(self) -> bool:
        """Return whether `write` can succeed."""

    def read(self) -> PropertyValue:
        """Return current value."""

    def write(self, value: PropertyValue) -> None:
        """Replace current value."""


class PropertyBag(ABC):
    """Per-owner mapping from property name to dynamic property."""

    @abstractmethod
    def define(
        self,
        name: str,
        getter: Getter | None = None,
        setter: Setter | None = None,
        *,
        use_initial_value: bool = False,
        initial_value: PropertyValue | None = NO_VALUE,
    ) -> None:
        """Define a delegate-backed property; fail if name already exists."""

    @abstractmethod
    def set(self, name: str, value: PropertyValue) -> None:
        """Write existing property or create a plain value property."""

    @overload
    def get(
        self,
        name: str,
        expected_type: None = None,
        *,
        search_static: bool = False,
        use_default: bool = False,
        default: PropertyValue | None = None,
    ) -> PropertyValue | None: ...

    @overload
    def get(
        self,
        name: str,
        expected_type: type[TValue],
        *,
        search_static: bool = False,
        use_default: bool = False,
        default: TValue | None = None,
    ) -> TValue: ...

    @abstractmethod
    def get(
        self,
        name: str,
        expected_type: type | None = None,
        *,
        search_static: bool = False,
        use_default: bool = False,
        default: PropertyValue | None = None,
    ) -> PropertyValue | None:
        """Resolve bag entry, then static member, then default."""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return whether name is present in the bag."""

    @abstractmethod
    def names(self) -> tuple[str, ...]:
        """Return sorted property names."""


def create_value_property(value: PropertyValue | None = None) -> DynamicProperty:
    """Create plain value-holder property."""
    from dynamics.properties.variants import ValueProperty

    return ValueProperty(value)


def create_delegate_property(
    getter: Getter | None = None,
    setter: Setter | None = None,
    *,
    use_initial_value: bool = False,
    initial_value: PropertyValue | None = NO_VALUE,
    name: str | None = None,
) -> DynamicProperty:
    """Create delegate-backed property."""
    from dynamics.properties.variants import DelegateProperty

    return DelegateProperty(
        getter,
        setter,
        use_initial_value=use_initial_value,
        initial_value=initial_value,
        name=name,
    )


def create_property_bag(owner: object | None = None) -> PropertyBag:
    """Create default property-bag implementation bound to owner."""
    from dynamics.properties.bag import RuntimePropertyBag

    return RuntimePropertyBag(owner)
