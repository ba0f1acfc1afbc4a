"""Shared utilities for reflectpattern modules."""

from .exceptions import (
    ArgumentMismatchError,
    ConfigurationError,
    ConstructionError,
    InstantiationError,
    ReflectionError,
    ReflectPatternError,
)

__all__ = [
    "ReflectPatternError",
    "ReflectionError",
    "ConstructionError",
    "InstantiationError",
    "ArgumentMismatchError",
    "ConfigurationError",
]
