"""
Lambda entry point wrapper.

Turns a base handler into the function registered with the host and
describes failures the way the Lambda runtime reports them.
"""
from __future__ import annotations

import functools
import json
from typing import Any, Callable

from lambda_combinators.combinators import LogFn
from lambda_combinators.result import HandlerError


def error_report(exc: BaseException) -> dict[str, str]:
    """Structured failure report for an aborted invocation."""
    message = exc.cause if isinstance(exc, HandlerError) else str(exc)
    return {
        "errorType": type(exc).__name__,
        "errorMessage": message,
    }


def lambda_entry(
    handler: Callable[[Any, Any], Any],
    *,
    log: LogFn | None = None,
) -> Callable[[Any, Any], Any]:
    """Delegate to ``handler``, logging the report of any application error before re-raising it."""

    log_fn = log or print

    @functools.wraps(handler)
    def lambda_handler(event, context):
        try:
            return handler(event, context)
        except HandlerError as exc:
            log_fn(json.dumps(error_report(exc)))
            raise

    return lambda_handler
