"""Owner base class exposing a dynamic property bag."""

from __future__ import annotations

from typing import TypeVar, overload

from dynamics.api.properties import NO_VALUE, Getter, PropertyBag, PropertyValue, Setter
from dynamics.api.setup import SetupService
from dynamics.properties.bag import RuntimePropertyBag
from dynamics.properties.declarative import add_dynamic_property as _add_dynamic_property

TValue = TypeVar("TValue")


class DynamicPropertyCollection:
    """Object whose named properties can be set and read at will.

    Properties behave like attributes on plain Python objects: any name can
    be set, values are dynamically typed, and members marked with
    `dynamic_property` on a `has_dynamic_properties` class are bound into the
    bag automatically. Subclasses call `super().__init__()` last so bound
    getters see initialised state.
    """

    setup_service: SetupService | None = None

    def __init__(self, *, setup_service: SetupService | None = None) -> None:
        self._dynamic_properties: PropertyBag = RuntimePropertyBag(self)
        service = setup_service or type(self).setup_service
        if service is None:
            from dynamics.runtime.setup_service import default_setup_service

            service = default_setup_service()
        service.handle(self)

    @property
    def dynamic_properties(self) -> PropertyBag:
        return self._dynamic_properties

    def define(
        self,
        name: str,
        getter: Getter | None = None,
        setter: Setter | None = None,
        *,
        use_initial_value: bool = False,
        initial_value: PropertyValue | None = NO_VALUE,
    ) -> None:
        """Define a delegate-backed property with the given getter and/or setter."""
        self._dynamic_properties.define(
            name,
            getter,
            setter,
            use_initial_value=use_initial_value,
            initial_value=initial_value,
        )

    def set(self, name: str, value: PropertyValue) -> None:
        """Set property name to value, creating it when absent."""
        self._dynamic_properties.set(name, value)

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

    def get(
        self,
        name: str,
        expected_type: type | None = None,
        *,
        search_static: bool = False,
        use_default: bool = False,
        default: PropertyValue | None = None,
    ) -> PropertyValue | None:
        """Retrieve property value.

        `search_static` falls back to the ordinary attribute of the same name,
        `use_default` returns `default` instead of raising when nothing matched.
        """
        return self._dynamic_properties.get(
            name,
            expected_type,
            search_static=search_static,
            use_default=use_default,
            default=default,
        )

    def has(self, name: str) -> bool:
        return self._dynamic_properties.has(name)

    def property_names(self) -> tuple[str, ...]:
        return self._dynamic_properties.names()

    def add_dynamic_property(self, name: str) -> None:
        """Bind the declared property `name` into the bag."""
        _add_dynamic_property(self, name)
