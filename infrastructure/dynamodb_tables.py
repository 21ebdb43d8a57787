"""Script to create the workshop DynamoDB table for LocalStack or AWS."""

import asyncio
from typing import Any

import aioboto3
from botocore.exceptions import ClientError

from src.config import settings
from src.dal.base import get_dynamodb_config
from src.dal.keys import PARTITION_KEY, SORT_KEY
from src.logging.config import configure_logging, get_logger

logger = get_logger(__name__)


async def create_workshop_table(dynamodb: Any, table_name: str) -> bool:
    """
    Create the single wide-row table.

    Every entity kind shares this table: the hash key is the client id
    and the range key is the tagged entity id. No secondary indexes.

    Args:
        dynamodb: DynamoDB resource
        table_name: Name of the table

    Returns:
        True if the table was created, False if it already existed
    """
    try:
        table = await dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": PARTITION_KEY, "KeyType": "HASH"},
                {"AttributeName": SORT_KEY, "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": PARTITION_KEY, "AttributeType": "S"},
                {"AttributeName": SORT_KEY, "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        await table.wait_until_exists()
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            logger.info("Table already exists", extra={"context": {"table": table_name}})
            return False
        raise

    logger.info("Created table", extra={"context": {"table": table_name}})
    return True


async def main() -> None:
    """Create the configured table."""
    configure_logging()
    logger.info(
        "Creating DynamoDB table",
        extra={
            "context": {
                "region": settings.aws_region,
                "endpoint": settings.dynamodb_endpoint_url or "AWS",
            }
        },
    )

    session = aioboto3.Session()
    async with session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
        await create_workshop_table(dynamodb, settings.dynamodb_table_name)


if __name__ == "__main__":
    asyncio.run(main())
