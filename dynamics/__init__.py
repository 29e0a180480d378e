"""Dynamic property bags with declarative, once-per-type setup."""

from dynamics.api import (
    DuplicatePropertyError,
    DynamicPropertyError,
    InvalidDynamicPropertyError,
    NoGetterError,
    NoSetterError,
    PropertyNotFoundError,
    PropertyTypeError,
    dynamic_property,
    has_dynamic_properties,
)
from dynamics.properties.collection import DynamicPropertyCollection

__all__ = [
    "DuplicatePropertyError",
    "DynamicPropertyCollection",
    "DynamicPropertyError",
    "InvalidDynamicPropertyError",
    "NoGetterError",
    "NoSetterError",
    "PropertyNotFoundError",
    "PropertyTypeError",
    "dynamic_property",
    "has_dynamic_properties",
]
