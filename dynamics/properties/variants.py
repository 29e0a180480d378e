"""Dynamic-property variant implementations."""

from __future__ import annotations

from dynamics.api.errors import NoGetterError, NoSetterError
from dynamics.api.properties import NO_VALUE, Getter, PropertyValue, Setter


class ValueProperty:
    """Plain value holder with no backing member."""

    __slots__ = ("_value",)

    readable = True
    writable = True

    def __init__(self, value: PropertyValue | None = None) -> None:
        self._value = value

    def read(self) -> PropertyValue | None:
        return self._value

    def write(self, value: PropertyValue) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"ValueProperty({self._value!r})"


class DelegateProperty:
    """Property that reads and writes through bound accessor functions.

    With `use_initial_value` the first observed value is frozen: either the
    supplied `initial_value`, or the getter result of the first read. Writes
    always go to the setter and never replace the frozen value.
    """

    __slots__ = ("_getter", "_setter", "_use_initial_value", "_initial_value", "_captured", "name")

    def __init__(
        self,
        getter: Getter | None = None,
        setter: Setter | None = None,
        *,
        use_initial_value: bool = False,
        initial_value: PropertyValue | None = NO_VALUE,
        name: str | None = None,
    ) -> None:
        self._getter = getter
        self._setter = setter
        self._use_initial_value = use_initial_value
        self._initial_value = None if initial_value is NO_VALUE else initial_value
        self._captured = use_initial_value and initial_value is not NO_VALUE
        self.name = name

    @property
    def readable(self) -> bool:
        return self._getter is not None or self._captured

    @property
    def writable(self) -> bool:
        return self._setter is not None

    @property
    def use_initial_value(self) -> bool:
        return self._use_initial_value

    def read(self) -> PropertyValue | None:
        if self._captured:
            return self._initial_value
        if self._getter is None:
            raise NoGetterError(self.name)
        value = self._getter()
        if self._use_initial_value:
            self._initial_value = value
            self._captured = True
        return value

    def write(self, value: PropertyValue) -> None:
        if self._setter is None:
            raise NoSetterError(self.name)
        self._setter(value)

    def __repr__(self) -> str:
        return (
            f"DelegateProperty(name={self.name!r}, readable={self.readable}, "
            f"writable={self.writable}, use_initial_value={self._use_initial_value})"
        )
