"""Consolidated exceptions for reflectpattern.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class ReflectPatternError(Exception):
    """Base exception for reflectpattern errors"""

    pass


class ReflectionError(ReflectPatternError):
    """Base exception for dynamic construction errors"""

    pass


class ConstructionError(ReflectionError):
    """Raised when the target has no usable public constructor"""

    def __init__(self, message: str, target: object = None):
        super().__init__(message)
        self.target = target


class InstantiationError(ReflectionError):
    """Raised when a dependency type cannot be default-constructed"""

    def __init__(self, message: str, dependency_type: object = None):
        super().__init__(message)
        self.dependency_type = dependency_type


class ArgumentMismatchError(ReflectionError):
    """Raised when manufactured arguments do not fit the constructor"""

    def __init__(self, message: str, target: object = None):
        super().__init__(message)
        self.target = target


class ConfigurationError(ReflectPatternError, ValueError):
    """Raised when configuration is invalid or missing"""

    pass
