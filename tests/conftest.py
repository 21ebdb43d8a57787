"""Shared fixtures: a moto DynamoDB server and a fresh table per test."""

import socket
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager
from typing import Any
from uuid import uuid4

import aioboto3
import pytest
from moto.server import ThreadedMotoServer

from infrastructure.dynamodb_tables import create_workshop_table
from src.config import settings
from src.dal.base import get_dynamodb_config


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def moto_server() -> Iterator[str]:
    """
    Run moto as a local HTTP server for the whole session.

    aioboto3 talks to it over real HTTP, so requests go through the same
    serialization as against DynamoDB.
    """
    port = _free_port()
    server = ThreadedMotoServer(ip_address="127.0.0.1", port=port, verbose=False)
    server.start()
    yield f"http://127.0.0.1:{port}"
    server.stop()


@pytest.fixture
async def dynamodb_table(moto_server: str, monkeypatch) -> str:
    """
    Point settings at the moto server and create an empty table.

    Each test gets its own table name, so no state leaks between tests.

    Returns:
        Name of the created table
    """
    monkeypatch.setattr(settings, "dynamodb_endpoint_url", moto_server)
    monkeypatch.setattr(settings, "aws_region", "us-east-1")
    monkeypatch.setattr(settings, "aws_access_key_id", "testing")
    monkeypatch.setattr(settings, "aws_secret_access_key", "testing")
    monkeypatch.setattr(settings, "aws_session_token", None)
    monkeypatch.setattr(settings, "dynamodb_table_name", f"workshop-data-{uuid4().hex}")

    session = aioboto3.Session()
    async with session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
        await create_workshop_table(dynamodb, settings.dynamodb_table_name)

    return settings.dynamodb_table_name


@pytest.fixture
def raw_table(dynamodb_table: str):
    """Open the test table directly, bypassing the DAOs."""

    @asynccontextmanager
    async def _open() -> AsyncIterator[Any]:
        session = aioboto3.Session()
        async with session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
            yield await dynamodb.Table(dynamodb_table)

    return _open


@pytest.fixture
def stored_items(raw_table):
    """Return every row of the test table keyed by (partitionKey, sortKey)."""

    async def _scan() -> dict[tuple[str, str], dict[str, Any]]:
        async with raw_table() as table:
            response = await table.scan()
        return {(item["partitionKey"], item["sortKey"]): item for item in response["Items"]}

    return _scan
