"""Public dynamic-property API contracts."""

from dynamics.api.errors import (
    DuplicatePropertyError,
    DynamicPropertyError,
    InvalidDynamicPropertyError,
    NoGetterError,
    NoSetterError,
    PropertyNotFoundError,
    PropertyTypeError,
)
from dynamics.api.logging import DynamicsLoggingConfig, configure_logging
from dynamics.api.markers import (
    HasDynamicProperties,
    dynamic_property,
    find_marker,
    has_dynamic_properties,
    is_dynamic_property,
    mark_dynamic,
)
from dynamics.api.properties import (
    DynamicProperty,
    Getter,
    NO_VALUE,
    PropertyBag,
    Setter,
    create_delegate_property,
    create_property_bag,
    create_value_property,
)
from dynamics.api.setup import (
    SetupHandler,
    SetupRoutine,
    SetupService,
    create_dynamic_property_setup_service,
    create_setup_service,
    default_setup_service,
)

__all__ = [
    "DuplicatePropertyError",
    "DynamicProperty",
    "DynamicPropertyError",
    "DynamicsLoggingConfig",
    "Getter",
    "HasDynamicProperties",
    "InvalidDynamicPropertyError",
    "NO_VALUE",
    "NoGetterError",
    "NoSetterError",
    "PropertyBag",
    "PropertyNotFoundError",
    "PropertyTypeError",
    "Setter",
    "SetupHandler",
    "SetupRoutine",
    "SetupService",
    "configure_logging",
    "create_delegate_property",
    "create_dynamic_property_setup_service",
    "create_property_bag",
    "create_setup_service",
    "create_value_property",
    "default_setup_service",
    "dynamic_property",
    "find_marker",
    "has_dynamic_properties",
    "is_dynamic_property",
    "mark_dynamic",
]
