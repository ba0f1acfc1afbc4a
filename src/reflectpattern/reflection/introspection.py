"""Read-only inspection of a class constructor.

Nothing in this module creates instances; it only describes what the
constructor of a target class expects.
"""

import inspect
from dataclasses import dataclass

from loguru import logger

from reflectpattern.shared.exceptions import ConstructionError

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class ConstructorInfo:
    """Description of a class constructor"""

    target: type
    signature: inspect.Signature
    # Formal parameters in declaration order, without *args/**kwargs
    parameters: tuple[inspect.Parameter, ...]

    @property
    def name(self) -> str:
        return self.target.__qualname__


def _read_signature(target: type) -> inspect.Signature:
    try:
        return inspect.signature(target, eval_str=True)
    except Exception:
        # String annotations that fail to evaluate stay as strings
        return inspect.signature(target)


def inspect_constructor(target: object) -> ConstructorInfo:
    """Describe the constructor of a class.

    Args:
        target: Class to inspect

    Returns:
        ConstructorInfo with the formal parameters of the constructor

    Raises:
        ConstructionError: If target is not a class, is abstract, or has
            no public constructor
    """
    if not inspect.isclass(target):
        raise ConstructionError(
            f"Cannot construct {target!r}: not a class", target=target
        )

    name = target.__qualname__

    if inspect.isabstract(target):
        abstract = sorted(getattr(target, "__abstractmethods__", ()))
        raise ConstructionError(
            f"Cannot construct {name}: abstract methods {abstract}",
            target=target,
        )

    # __init__ = None is how a class opts out of public construction
    if getattr(target, "__init__", None) is None:
        raise ConstructionError(
            f"Cannot construct {name}: no public constructor", target=target
        )

    try:
        signature = _read_signature(target)
    except (TypeError, ValueError) as e:
        raise ConstructionError(
            f"Cannot construct {name}: constructor signature unavailable ({e})",
            target=target,
        ) from e

    parameters = tuple(
        p for p in signature.parameters.values() if p.kind not in _VARIADIC
    )
    logger.debug(
        f"Inspected {name}: {len(parameters)} parameter(s) "
        f"{[p.name for p in parameters]}"
    )
    return ConstructorInfo(
        target=target, signature=signature, parameters=parameters
    )
