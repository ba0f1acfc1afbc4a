"""Generic factory: introspection followed by intercession"""

import inspect
from typing import Any, TypeVar, cast

from loguru import logger

from reflectpattern.channels.sms import SmsService
from reflectpattern.reflection.intercession import (
    ensure_default_constructible,
    invoke_constructor,
    manufacture_arguments,
)
from reflectpattern.reflection.introspection import inspect_constructor
from reflectpattern.shared.exceptions import InstantiationError

T = TypeVar("T")


class DynamicFactory:
    """Builds objects without a literal constructor call.

    By default every constructor parameter receives a fresh instance of
    one fixed dependency, whatever the parameter's declared type. With
    ``resolve_declared`` the declared annotation is built instead when it
    is a concrete, default-constructible class, and the fixed dependency
    is the fallback.
    """

    def __init__(
        self, dependency: Any = SmsService, resolve_declared: bool = False
    ) -> None:
        self._dependency = dependency
        self._resolve_declared = resolve_declared

    @property
    def dependency(self) -> Any:
        return self._dependency

    def create(self, target: type[T]) -> T:
        """Create an instance of target.

        Args:
            target: Class to instantiate

        Returns:
            New, unshared instance of target

        Raises:
            ConstructionError: If target has no usable constructor
            InstantiationError: If a dependency cannot be default-constructed
            ArgumentMismatchError: If arguments do not fit the constructor
        """
        info = inspect_constructor(target)
        args, kwargs = manufacture_arguments(info, self._select)
        instance = invoke_constructor(info, args, kwargs)
        logger.debug(f"Created {info.name} via reflection")
        return cast(T, instance)

    def _select(self, parameter: inspect.Parameter) -> Any:
        if self._resolve_declared:
            annotation = parameter.annotation
            if (
                annotation is not inspect.Parameter.empty
                and inspect.isclass(annotation)
            ):
                try:
                    ensure_default_constructible(annotation)
                except InstantiationError:
                    logger.debug(
                        f"Declared type {annotation.__qualname__} of "
                        f"{parameter.name} is not default-constructible, "
                        f"using {self._dependency!r}"
                    )
                else:
                    return annotation
        return self._dependency


def create(target: type[T], *, dependency: Any = None) -> T:
    """Create an instance of target, injecting SmsService by default.

    Args:
        target: Class to instantiate
        dependency: Class or zero-argument builder used for every parameter

    Returns:
        New instance of target
    """
    if dependency is None:
        dependency = SmsService
    return DynamicFactory(dependency).create(target)
