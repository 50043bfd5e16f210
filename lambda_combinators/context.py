"""Invocation context handed to handlers, configured from the Lambda environment."""
from __future__ import annotations

import os
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

REQUIRED_ENV_VARS = {
    "function_name": "AWS_LAMBDA_FUNCTION_NAME",
    "function_version": "AWS_LAMBDA_FUNCTION_VERSION",
    "function_memory_size": "AWS_LAMBDA_FUNCTION_MEMORY_SIZE",
    "log_group_name": "AWS_LAMBDA_LOG_GROUP_NAME",
    "log_stream_name": "AWS_LAMBDA_LOG_STREAM_NAME",
}


@dataclass(frozen=True, slots=True)
class LambdaContext:
    """Read-only description of the current invocation."""

    function_name: str
    function_version: str
    function_memory_size: int
    log_group_name: str
    log_stream_name: str
    aws_request_id: str
    invoked_function_arn: str
    deadline_ms: int
    identity: Mapping[str, Any] | None = None
    client_context: Mapping[str, Any] | None = None

    def get_remaining_time_in_millis(self, now_ms: int | None = None) -> int:
        now = now_ms if now_ms is not None else int(time.time() * 1000)
        return max(self.deadline_ms - now, 0)

    @classmethod
    def from_environ(
        cls,
        *,
        aws_request_id: str,
        invoked_function_arn: str,
        deadline_ms: int,
        identity: Mapping[str, Any] | None = None,
        client_context: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> LambdaContext:
        """
        Build a context from the function configuration in the environment.

        Per-invocation values (request id, ARN, deadline) come from the caller.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV_VARS.values() if not env.get(name)]
        if missing:
            raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

        raw_memory = env[REQUIRED_ENV_VARS["function_memory_size"]]
        try:
            memory_size = int(raw_memory)
        except ValueError as exc:
            raise ValueError(
                f"AWS_LAMBDA_FUNCTION_MEMORY_SIZE must be an integer, got '{raw_memory}'",
            ) from exc

        return cls(
            function_name=env[REQUIRED_ENV_VARS["function_name"]],
            function_version=env[REQUIRED_ENV_VARS["function_version"]],
            function_memory_size=memory_size,
            log_group_name=env[REQUIRED_ENV_VARS["log_group_name"]],
            log_stream_name=env[REQUIRED_ENV_VARS["log_stream_name"]],
            aws_request_id=aws_request_id,
            invoked_function_arn=invoked_function_arn,
            deadline_ms=deadline_ms,
            identity=identity,
            client_context=client_context,
        )
