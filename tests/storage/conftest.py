"""
Conftest for storage tests - moto-backed DynamoDB tables.
"""

import os

import boto3
import pytest
from moto import mock_aws


@pytest.fixture
def ddb_tables():
    """
    Create moto-mocked artifact and comment tables.
    The cached DynamoDB resource is reset around every test, so the stores
    pick these tables up on first use.
    """
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name=os.environ["AWS_REGION"])

        artifacts = dynamodb.create_table(
            TableName=os.environ["ARTIFACTS_TABLE"],
            KeySchema=[{"AttributeName": "artifact_id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "artifact_id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        comments = dynamodb.create_table(
            TableName=os.environ["COMMENTS_TABLE"],
            KeySchema=[{"AttributeName": "comment_id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "comment_id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )

        yield {"artifacts": artifacts, "comments": comments}
