"""
Function transformers that lift simpler handler shapes into the canonical
``handler(event, context)`` shape the Lambda host invokes.

Each combinator maps a function to a function. They can be stacked, e.g.::

    def greet(event):
        return f"Hello, {event['name']}"

    lambda_handler = with_pure_interface(without_context(greet))

None of them keep state or look at the event or context; both are forwarded
as-is. Application errors travel as ``Err`` values and are turned into a
``HandlerError`` raised for the current invocation only.
"""
from __future__ import annotations

import asyncio
import functools
import inspect
from concurrent.futures import ThreadPoolExecutor
from collections.abc import Awaitable
from typing import Any, Callable, TypeVar, Union

from lambda_combinators.result import HandlerError, Result, unwrap

C = TypeVar("C")
E = TypeVar("E")
R = TypeVar("R")

LogFn = Callable[[str], None]
Handler = Callable[[E, C], R]
IOAction = Union[
    Callable[[], Union[Result[R], Awaitable[Result[R]]]],
    Awaitable[Result[R]],
]


def _emit(log: LogFn | None, message: str) -> None:
    if log:
        log(message)


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", repr(fn))


def _propagate(result: Result[R], *, name: str, log: LogFn | None) -> R:
    try:
        return unwrap(result)
    except HandlerError as exc:
        _emit(log, f"Handler {name} failed: {exc.cause}")
        raise


def _await_result(awaitable: Awaitable[Result[R]]) -> Result[R]:
    async def _await() -> Result[R]:
        return await awaitable

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(_await())
    # Inside a running loop: drive the action on its own loop in a worker thread.
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, _await()).result()


def _run_action(action: IOAction[R]) -> Result[R]:
    if callable(action):
        action = action()
        if not inspect.isawaitable(action):
            return action
    if inspect.isawaitable(action):
        return _await_result(action)
    raise TypeError(
        f"IO handler must return a callable or awaitable action, got {type(action).__name__}",
    )


def without_context(fn: Callable[[E], R]) -> Callable[[Any, E], R]:
    """Give a handler that takes only the event a leading, ignored context parameter."""

    @functools.wraps(fn)
    def wrapper(context: Any, event: E) -> R:
        return fn(event)

    return wrapper


def with_pure_interface(fn: Callable[[C, E], R]) -> Handler[E, C, R]:
    """Upgrade ``fn(context, event) -> result`` into a base handler. Never aborts."""

    @functools.wraps(fn)
    def handler(event: E, context: C) -> R:
        return fn(context, event)

    return handler


def with_fallable_interface(
    fn: Callable[[C, E], Result[R]],
    *,
    log: LogFn | None = None,
) -> Handler[E, C, R]:
    """
    Upgrade ``fn(context, event) -> Ok | Err`` into a base handler.

    ``Ok(value)`` is returned as ``value``; ``Err(message)`` aborts the
    invocation with ``HandlerError(message)``.
    """

    @functools.wraps(fn)
    def handler(event: E, context: C) -> R:
        return _propagate(fn(context, event), name=_name(fn), log=log)

    return handler


def with_io_interface(
    fn: Callable[[C, E], IOAction[R]],
    *,
    log: LogFn | None = None,
) -> Handler[E, C, R]:
    """
    Upgrade a handler that performs side effects into a base handler.

    ``fn(context, event)`` returns an action: a zero-argument callable (plain or
    ``async def``) or an awaitable, producing ``Ok | Err``. When the host is
    already inside an event loop, awaitables run on their own loop in a
    worker thread. The action runs to completion
    exactly once before its result is checked, so its effects happen even
    when it reports an error. Exceptions raised by the action itself are not
    caught.

    Example::

        def handler(context, event):
            def action():
                greeting = os.environ["GREETING"]
                return Ok(greeting + event["name"])
            return action

        lambda_handler = with_io_interface(handler)
    """

    @functools.wraps(fn)
    def handler(event: E, context: C) -> R:
        action = fn(context, event)
        result = _run_action(action)
        return _propagate(result, name=_name(fn), log=log)

    return handler


# camelCase aliases
withoutContext = without_context
withPureInterface = with_pure_interface
withFallableInterface = with_fallable_interface
withIOInterface = with_io_interface
