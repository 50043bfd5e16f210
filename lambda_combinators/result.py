"""Success/error results and the helper that turns an error into an aborted invocation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful handler result."""

    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """Application error reported by a handler."""

    error: str


Result = Union[Ok[T], Err]


class HandlerError(RuntimeError):
    """Aborts the current invocation with an application error string as its cause."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


def unwrap(result: Result[T] | Any) -> T:
    """Return the success value, or raise HandlerError carrying the error string."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise HandlerError(result.error)
    raise TypeError(
        f"Handler must return Ok or Err, got {type(result).__name__}",
    )
