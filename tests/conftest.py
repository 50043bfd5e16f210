from __future__ import annotations

import pytest

from lambda_combinators import LambdaContext

LAMBDA_ENV = {
    "AWS_LAMBDA_FUNCTION_NAME": "greeter",
    "AWS_LAMBDA_FUNCTION_VERSION": "$LATEST",
    "AWS_LAMBDA_FUNCTION_MEMORY_SIZE": "128",
    "AWS_LAMBDA_LOG_GROUP_NAME": "/aws/lambda/greeter",
    "AWS_LAMBDA_LOG_STREAM_NAME": "2026/10/19/[$LATEST]abc123",
}


@pytest.fixture
def lambda_env() -> dict[str, str]:
    return dict(LAMBDA_ENV)


@pytest.fixture
def context() -> LambdaContext:
    return LambdaContext(
        function_name="greeter",
        function_version="$LATEST",
        function_memory_size=128,
        log_group_name="/aws/lambda/greeter",
        log_stream_name="2026/10/19/[$LATEST]abc123",
        aws_request_id="req-1",
        invoked_function_arn="arn:aws:lambda:us-east-1:123456789012:function:greeter",
        deadline_ms=1_000_000,
    )
