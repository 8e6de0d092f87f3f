"""Result values for explicit error handling.

Operations that can fail in expected ways (a blank title, an unknown id, a
locked task) return ``Ok(value)`` or ``Err(error)`` instead of raising. Callers
branch with ``isinstance`` or the ``is_ok`` / ``is_err`` helpers.

Example usage:
    >>> def parse_limit(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Err("limit must be numeric")
    ...     return Ok(int(raw))
    ...
    >>> result = parse_limit("25")
    >>> if is_ok(result):
    ...     print(f"Limit: {result.value}")
    Limit: 25
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error."""
    return isinstance(result, Err)


def map_err(result: Ok[T] | Err[E], fn: Callable[[E], F]) -> Ok[T] | Err[F]:
    """Apply a function to the error inside an Err result.

    Used at layer boundaries to translate one error vocabulary into another
    (for example store failures into task errors).

    Args:
        result: The result to transform.
        fn: Function to apply to the Err value.

    Returns:
        The original Ok, or a new Err holding the translated error.
    """
    if isinstance(result, Err):
        return Err(fn(result.error))
    return result
