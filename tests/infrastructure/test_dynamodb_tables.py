"""Tests for the table provisioning script."""

from unittest.mock import AsyncMock

import aioboto3
import pytest
from botocore.exceptions import ClientError

from infrastructure.dynamodb_tables import create_workshop_table
from src.dal.base import get_dynamodb_config


@pytest.mark.asyncio
async def test_creates_single_table_with_composite_key() -> None:
    """Test the key schema of the shared table."""
    dynamodb = AsyncMock()

    created = await create_workshop_table(dynamodb, "workshop-data")

    assert created is True
    kwargs = dynamodb.create_table.call_args.kwargs
    assert kwargs["TableName"] == "workshop-data"
    assert kwargs["KeySchema"] == [
        {"AttributeName": "partitionKey", "KeyType": "HASH"},
        {"AttributeName": "sortKey", "KeyType": "RANGE"},
    ]
    assert "GlobalSecondaryIndexes" not in kwargs
    dynamodb.create_table.return_value.wait_until_exists.assert_awaited_once()


@pytest.mark.asyncio
async def test_existing_table_is_not_an_error() -> None:
    """Test that re-running the script is harmless."""
    dynamodb = AsyncMock()
    dynamodb.create_table.side_effect = ClientError(
        {"Error": {"Code": "ResourceInUseException", "Message": "exists"}}, "CreateTable"
    )

    assert await create_workshop_table(dynamodb, "workshop-data") is False


@pytest.mark.asyncio
async def test_other_errors_propagate() -> None:
    """Test that unexpected provisioning errors are raised."""
    dynamodb = AsyncMock()
    dynamodb.create_table.side_effect = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "no"}}, "CreateTable"
    )

    with pytest.raises(ClientError):
        await create_workshop_table(dynamodb, "workshop-data")


@pytest.mark.asyncio
async def test_second_run_against_server_reports_existing_table(dynamodb_table: str) -> None:
    """Test creating the table again against a real endpoint."""
    session = aioboto3.Session()
    async with session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
        created = await create_workshop_table(dynamodb, dynamodb_table)
        description = await (await dynamodb.Table(dynamodb_table)).key_schema

    assert created is False
    assert description == [
        {"AttributeName": "partitionKey", "KeyType": "HASH"},
        {"AttributeName": "sortKey", "KeyType": "RANGE"},
    ]
