"""Acting on an inspected constructor: build arguments and invoke it"""

import inspect
from collections.abc import Callable
from typing import Any

from loguru import logger

from reflectpattern.reflection.introspection import ConstructorInfo
from reflectpattern.shared.exceptions import (
    ArgumentMismatchError,
    InstantiationError,
)


def ensure_default_constructible(dependency_type: Any) -> None:
    """Check that a dependency can be called without arguments.

    Only the call signature is checked; nothing is instantiated.

    Args:
        dependency_type: Class or zero-argument builder

    Raises:
        InstantiationError: If the dependency cannot be built without arguments
    """
    name = getattr(dependency_type, "__qualname__", repr(dependency_type))

    if not callable(dependency_type):
        raise InstantiationError(
            f"Cannot instantiate {name}: not callable",
            dependency_type=dependency_type,
        )
    if inspect.isclass(dependency_type):
        if inspect.isabstract(dependency_type):
            raise InstantiationError(
                f"Cannot instantiate abstract class {name}",
                dependency_type=dependency_type,
            )
        if getattr(dependency_type, "__init__", None) is None:
            raise InstantiationError(
                f"Cannot instantiate {name}: no public constructor",
                dependency_type=dependency_type,
            )

    try:
        signature = inspect.signature(dependency_type)
    except (TypeError, ValueError):
        # Some builtins expose no signature; the call itself decides
        return

    try:
        signature.bind()
    except TypeError as e:
        raise InstantiationError(
            f"Cannot default-construct {name}: {e}",
            dependency_type=dependency_type,
        ) from e


def manufacture(dependency_type: Any) -> Any:
    """Default-construct one dependency instance.

    Errors raised inside the dependency's own constructor propagate
    unchanged.

    Args:
        dependency_type: Class or zero-argument builder

    Returns:
        New instance

    Raises:
        InstantiationError: If the dependency cannot be built without arguments
    """
    ensure_default_constructible(dependency_type)
    return dependency_type()


def manufacture_arguments(
    info: ConstructorInfo, select: Callable[[inspect.Parameter], Any]
) -> tuple[list[Any], dict[str, Any]]:
    """Manufacture one argument per formal constructor parameter.

    Args:
        info: Inspected constructor
        select: Picks the dependency type to build for a parameter

    Returns:
        Positional arguments in parameter order, and keyword-only arguments
    """
    args: list[Any] = []
    kwargs: dict[str, Any] = {}

    for parameter in info.parameters:
        value = manufacture(select(parameter))
        if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
            kwargs[parameter.name] = value
        else:
            args.append(value)
        logger.debug(
            f"Manufactured {type(value).__name__} for "
            f"{info.name}.{parameter.name}"
        )

    return args, kwargs


def invoke_constructor(
    info: ConstructorInfo,
    args: list[Any],
    kwargs: dict[str, Any] | None = None,
) -> Any:
    """Invoke the inspected constructor with the given arguments.

    Args:
        info: Inspected constructor
        args: Positional arguments in parameter order
        kwargs: Keyword-only arguments

    Returns:
        New instance of info.target

    Raises:
        ArgumentMismatchError: If the arguments do not bind to the signature
    """
    kwargs = kwargs or {}
    try:
        bound = info.signature.bind(*args, **kwargs)
    except TypeError as e:
        raise ArgumentMismatchError(
            f"Arguments do not match {info.name}{info.signature}: {e}",
            target=info.target,
        ) from e

    return info.target(*bound.args, **bound.kwargs)
