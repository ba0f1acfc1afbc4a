"""Dynamic construction through constructor introspection"""

from reflectpattern.reflection.factory import DynamicFactory, create
from reflectpattern.reflection.intercession import (
    ensure_default_constructible,
    invoke_constructor,
    manufacture,
    manufacture_arguments,
)
from reflectpattern.reflection.introspection import (
    ConstructorInfo,
    inspect_constructor,
)

__all__ = [
    "ConstructorInfo",
    "DynamicFactory",
    "create",
    "ensure_default_constructible",
    "inspect_constructor",
    "invoke_constructor",
    "manufacture",
    "manufacture_arguments",
]
