"""Dynamic-property implementations."""

from dynamics.properties.bag import RuntimePropertyBag
from dynamics.properties.collection import DynamicPropertyCollection
from dynamics.properties.declarative import (
    AccessorPlan,
    build_accessor_plan,
    register_dynamic_property_handler,
    setup_dynamic_properties,
)
from dynamics.properties.variants import DelegateProperty, ValueProperty

__all__ = [
    "AccessorPlan",
    "DelegateProperty",
    "DynamicPropertyCollection",
    "RuntimePropertyBag",
    "ValueProperty",
    "build_accessor_plan",
    "register_dynamic_property_handler",
    "setup_dynamic_properties",
]
