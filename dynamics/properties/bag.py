"""Property-bag implementation."""

from __future__ import annotations

import inspect

from dynamics.api.errors import DuplicatePropertyError, PropertyNotFoundError, PropertyTypeError
from dynamics.api.properties import NO_VALUE, DynamicProperty, Getter, PropertyBag, PropertyValue, Setter
from dynamics.properties.variants import DelegateProperty, ValueProperty
from dynamics.runtime.config import load_dynamics_config
from dynamics.runtime.logging import get_dynamics_logger

_LOG = get_dynamics_logger("properties")
_MISSING = object()


def resolve_static_member(owner: object | None, name: str) -> object:
    """Return value of owner's public non-callable member, or the missing sentinel.

    Readable properties and plain attributes qualify; methods, private names
    and setter-only properties do not. A raising getter propagates.
    """
    if owner is None or not name or name.startswith("_"):
        return _MISSING
    member = inspect.getattr_static(owner, name, _MISSING)
    if member is _MISSING:
        return _MISSING
    if inspect.isroutine(member) or isinstance(member, (staticmethod, classmethod)):
        return _MISSING
    if isinstance(member, property) and member.fget is None:
        return _MISSING
    return getattr(owner, name)


class RuntimePropertyBag(PropertyBag):
    """Default dict-backed property bag bound to one owner."""

    def __init__(self, owner: object | None = None, *, warn_empty_delegates: bool | None = None) -> None:
        self._owner = owner
        self._properties: dict[str, DynamicProperty] = {}
        if warn_empty_delegates is None:
            warn_empty_delegates = load_dynamics_config().warn_empty_delegates
        self._warn_empty_delegates = warn_empty_delegates

    @property
    def owner(self) -> object | None:
        return self._owner

    def define(
        self,
        name: str,
        getter: Getter | None = None,
        setter: Setter | None = None,
        *,
        use_initial_value: bool = False,
        initial_value: PropertyValue | None = NO_VALUE,
    ) -> None:
        if name in self._properties:
            raise DuplicatePropertyError(self._owner, name)
        if getter is None and setter is None and self._warn_empty_delegates:
            _LOG.warning(
                "empty_delegate_definition name=%s owner=%s",
                name,
                type(self._owner).__qualname__,
            )
        self._properties[name] = DelegateProperty(
            getter,
            setter,
            use_initial_value=use_initial_value,
            initial_value=initial_value,
            name=name,
        )

    def set(self, name: str, value: PropertyValue) -> None:
        existing = self._properties.get(name)
        if existing is None:
            self._properties[name] = ValueProperty(value)
            return
        existing.write(value)

    def get(
        self,
        name: str,
        expected_type: type | None = None,
        *,
        search_static: bool = False,
        use_default: bool = False,
        default: PropertyValue | None = None,
    ) -> PropertyValue | None:
        value = self._resolve(name, search_static=search_static, use_default=use_default, default=default)
        if expected_type is not None and value is not None and not isinstance(value, expected_type):
            raise PropertyTypeError(name, expected_type, value)
        return value

    def has(self, name: str) -> bool:
        return name in self._properties

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._properties))

    def entry(self, name: str) -> DynamicProperty | None:
        """Return raw property entry for name if present."""
        return self._properties.get(name)

    def _resolve(
        self,
        name: str,
        *,
        search_static: bool,
        use_default: bool,
        default: PropertyValue | None,
    ) -> PropertyValue | None:
        prop = self._properties.get(name)
        if prop is not None:
            return prop.read()
        if search_static:
            value = resolve_static_member(self._owner, name)
            if value is not _MISSING:
                return value
        if use_default:
            return default
        raise PropertyNotFoundError(self._owner, name)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"RuntimePropertyBag(owner={type(self._owner).__qualname__}, names={list(self.names())})"
