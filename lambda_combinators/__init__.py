"""Combinators that adapt plain, fallible and effectful handlers to the Lambda handler shape."""
from __future__ import annotations

from lambda_combinators.combinators import (
    IOAction,
    LogFn,
    withFallableInterface,
    withIOInterface,
    withoutContext,
    withPureInterface,
    with_fallable_interface,
    with_io_interface,
    with_pure_interface,
    without_context,
)
from lambda_combinators.context import LambdaContext
from lambda_combinators.entry import error_report, lambda_entry
from lambda_combinators.result import Err, HandlerError, Ok, Result, unwrap

__all__ = [
    "Err",
    "HandlerError",
    "IOAction",
    "LambdaContext",
    "LogFn",
    "Ok",
    "Result",
    "error_report",
    "lambda_entry",
    "unwrap",
    "withFallableInterface",
    "withIOInterface",
    "withPureInterface",
    "with_fallable_interface",
    "with_io_interface",
    "with_pure_interface",
    "withoutContext",
    "without_context",
]
