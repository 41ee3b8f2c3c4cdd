"""
Centralized AWS client factory with lazy initialization and caching.
Used by all Lambda functions and the decay worker to avoid repeating boilerplate.
"""

from __future__ import annotations

from typing import Any, Optional

import boto3
from mypy_boto3_bedrock_runtime.client import BedrockRuntimeClient
from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource

from eterna.settings import AWS_REGION


# -------------------------------------------------------------------------------------
# Lazy-initialized client caches
# -------------------------------------------------------------------------------------
_dynamodb_resource: Optional[DynamoDBServiceResource] = None
_bedrock_runtime: Optional[BedrockRuntimeClient] = None


# -------------------------------------------------------------------------------------
# DynamoDB
# -------------------------------------------------------------------------------------
def get_dynamodb() -> DynamoDBServiceResource:
    """
    Returns a cached DynamoDB resource.
    """
    global _dynamodb_resource

    if _dynamodb_resource is None:
        _dynamodb_resource = boto3.resource("dynamodb", region_name=AWS_REGION)  # type: ignore

    return _dynamodb_resource


def get_ddb_table(table_name: str) -> Any:
    """
    Convenience wrapper for DynamoDB table access.
    Returns a boto3 Table object.
    """
    dynamo: DynamoDBServiceResource = get_dynamodb()
    return dynamo.Table(table_name)  # type: ignore[no-any-return]


# -------------------------------------------------------------------------------------
# Bedrock Runtime
# -------------------------------------------------------------------------------------
def get_bedrock_runtime(region: Optional[str] = None) -> BedrockRuntimeClient:
    """
    Returns a cached Bedrock Runtime client (used for narrative generation).
    """
    global _bedrock_runtime

    if _bedrock_runtime is None:
        _bedrock_runtime = boto3.client(  # type: ignore[assignment]
            "bedrock-runtime", region_name=region or AWS_REGION
        )

    return _bedrock_runtime  # type: ignore[return-value]


# -------------------------------------------------------------------------------------
# Test support
# -------------------------------------------------------------------------------------
def reset_clients() -> None:
    """
    Drop every cached client so the next call builds a fresh one.
    Tests call this so moto-mocked resources never leak between cases.
    """
    global _dynamodb_resource, _bedrock_runtime
    _dynamodb_resource = None
    _bedrock_runtime = None
