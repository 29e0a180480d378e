"""Public dynamic-property error contracts."""

from __future__ import annotations


def describe_owner(owner: object | None) -> str:
    """Return `<qualified type> (<str>)` label used in error messages."""
    if owner is None:
        return "<unbound>"
    owner_type = type(owner)
    return f"{owner_type.__module__}.{owner_type.__qualname__} ({owner})"


class DynamicPropertyError(Exception):
    """Base class for every dynamic-property failure."""


class DuplicatePropertyError(DynamicPropertyError, ValueError):
    """Raised when `define` targets a name that already exists."""

    def __init__(self, owner: object | None, name: str) -> None:
        self.owner = owner
        self.name = name
        super().__init__(
            f"dynamic property already defined: {name} on {describe_owner(owner)}; cannot redefine"
        )


class NoGetterError(DynamicPropertyError, AttributeError):
    """Raised when reading a delegate-backed property without getter."""

    def __init__(self, name: str | None = None) -> None:
        super().__init__(f"dynamic property has no getter: {name or '<anonymous>'}", name=name)


class NoSetterError(DynamicPropertyError, AttributeError):
    """Raised when writing a delegate-backed property without setter."""

    def __init__(self, name: str | None = None) -> None:
        super().__init__(f"dynamic property has no setter: {name or '<anonymous>'}", name=name)


class PropertyNotFoundError(DynamicPropertyError, LookupError):
    """Raised when `get` exhausted bag, static and default lookups."""

    def __init__(self, owner: object | None, name: str) -> None:
        self.owner = owner
        self.name = name
        super().__init__(f"missing dynamic property: {name} on {describe_owner(owner)}")


class PropertyTypeError(DynamicPropertyError, TypeError):
    """Raised when a resolved value does not match the caller's expected type."""

    def __init__(self, name: str, expected_type: type, value: object) -> None:
        self.name = name
        self.expected_type = expected_type
        self.value = value
        super().__init__(
            f"dynamic property {name} has type {type(value).__qualname__}, "
            f"expected {expected_type.__qualname__}"
        )


class InvalidDynamicPropertyError(DynamicPropertyError, TypeError):
    """Raised when a declarative allow-list names a member that is not opted in."""

    def __init__(self, owner_type: type, member_name: str, reason: str) -> None:
        self.owner_type = owner_type
        self.member_name = member_name
        super().__init__(f"invalid dynamic property {owner_type.__qualname__}.{member_name}: {reason}")


__all__ = [
    "DuplicatePropertyError",
    "DynamicPropertyError",
    "InvalidDynamicPropertyError",
    "NoGetterError",
    "NoSetterError",
    "PropertyNotFoundError",
    "PropertyTypeError",
    "describe_owner",
]
