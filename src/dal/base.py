"""Base DAO with the CRUD surface shared by every entity kind."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable, Iterator
from contextlib import asynccontextmanager, contextmanager
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from src.config import settings
from src.dal.dtos import StoredRecord
from src.dal.keys import PARTITION_KEY, SORT_KEY, EntityTag, build_key
from src.exceptions import DataProcessingException
from src.logging.config import get_logger
from src.models.base import DomainModel
from src.utils.ids import generate_id
from src.utils.metrics import MetricsStopWatch

logger = get_logger(__name__)

EntityT = TypeVar("EntityT", bound=DomainModel)


def get_dynamodb_config() -> dict[str, Any]:
    """
    Build DynamoDB resource parameters from settings.

    With no explicit credentials the default credential chain (IAM role
    in Lambda) is used. An endpoint URL is only passed for LocalStack.

    Returns:
        Dictionary of boto3 resource parameters
    """
    config: dict[str, Any] = {"region_name": settings.aws_region}

    if settings.dynamodb_endpoint_url:
        config["endpoint_url"] = settings.dynamodb_endpoint_url

    # Lambda temporary credentials need all three values
    if settings.aws_access_key_id:
        config["aws_access_key_id"] = settings.aws_access_key_id
    if settings.aws_secret_access_key:
        config["aws_secret_access_key"] = settings.aws_secret_access_key
    if settings.aws_session_token:
        config["aws_session_token"] = settings.aws_session_token

    return config


class BaseDao(ABC, Generic[EntityT]):
    """
    CRUD access to one entity kind of the single table.

    Subclasses set the entity tag, the stored record type and the name of
    the id field, and implement ``to_domain`` / ``to_dto``. Every
    operation is timed and any failure is logged once and re-raised as
    DataProcessingException.
    """

    entity_tag: ClassVar[EntityTag]
    dto_class: ClassVar[type[StoredRecord]]
    id_field: ClassVar[str]

    def __init__(
        self,
        table_name: str | None = None,
        clock: Callable[[], datetime] = datetime.now,
        id_generator: Callable[[], str] = generate_id,
        page_size: int | None = None,
    ) -> None:
        """
        Initialize the DAO.

        Args:
            table_name: DynamoDB table; defaults to the configured one
            clock: Source of local, zoneless timestamps
            id_generator: Source of new entity ids
            page_size: Query Limit per page in read_all; None lets
                DynamoDB page by size
        """
        self.table_name = table_name or settings.dynamodb_table_name
        self.clock = clock
        self.id_generator = id_generator
        self.page_size = page_size
        self.session = aioboto3.Session()

    @property
    def dao_name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def to_domain(self, dto: StoredRecord) -> EntityT:
        """Map a stored record to the domain entity, removing tags."""

    @abstractmethod
    def to_dto(self, entity: EntityT) -> StoredRecord:
        """Map a domain entity to its stored record, adding tags."""

    @asynccontextmanager
    async def table(self) -> AsyncIterator[Any]:
        """Open a DynamoDB resource and yield the table handle."""
        async with self.session.resource("dynamodb", **get_dynamodb_config()) as dynamodb:
            yield await dynamodb.Table(self.table_name)

    @contextmanager
    def _operation(self, operation: str) -> Iterator[None]:
        with MetricsStopWatch(f"{self.dao_name}::{operation}"):
            try:
                yield
            except Exception as exc:
                logger.error(
                    f"ERROR::{self.dao_name}",
                    exc_info=exc,
                    extra={
                        "context": {
                            "dao": self.dao_name,
                            "operation": operation,
                            "store_error": isinstance(exc, (ClientError, BotoCoreError)),
                        }
                    },
                )
                raise DataProcessingException(
                    f"Error in {self.dao_name}.{operation}: {exc}", cause=exc
                ) from exc

    def _item_to_domain(self, item: dict[str, Any]) -> EntityT:
        return self.to_domain(self.dto_class.from_item(item))

    async def read(self, client_id: str, entity_id: str) -> EntityT | None:
        """
        Get one entity by client and id.

        Returns:
            The entity, or None if the row does not exist
        """
        with self._operation("read"):
            key = build_key(client_id, self.entity_tag, entity_id)
            async with self.table() as table:
                response = await table.get_item(Key=key)

            item = response.get("Item")
            if item is None:
                return None
            return self._item_to_domain(item)

    async def read_all(self, client_id: str) -> list[EntityT]:
        """
        Get every entity of this kind stored under a client.

        Follows LastEvaluatedKey until the query is exhausted. The order
        of the result is not guaranteed.
        """
        with self._operation("read_all"):
            query_params: dict[str, Any] = {
                "KeyConditionExpression": "#pk = :pk AND begins_with(#sk, :prefix)",
                "ExpressionAttributeNames": {"#pk": PARTITION_KEY, "#sk": SORT_KEY},
                "ExpressionAttributeValues": {
                    ":pk": client_id,
                    ":prefix": self.entity_tag.value,
                },
            }
            if self.page_size:
                query_params["Limit"] = self.page_size

            items: list[dict[str, Any]] = []
            async with self.table() as table:
                while True:
                    response = await table.query(**query_params)
                    items.extend(response.get("Items", []))
                    last_key = response.get("LastEvaluatedKey")
                    if not last_key:
                        break
                    query_params["ExclusiveStartKey"] = last_key

            return [self._item_to_domain(item) for item in items]

    async def create(self, entity: EntityT) -> EntityT:
        """
        Store a new entity under a freshly minted id.

        Both timestamps are set to now. The write is an unconditional put;
        minted ids are assumed not to collide.

        Returns:
            The entity as written, including its id and timestamps
        """
        with self._operation("create"):
            now = self.clock()
            draft = entity.model_copy(
                update={
                    self.id_field: self.id_generator(),
                    "created_on": now,
                    "last_updated_on": now,
                }
            )
            dto = self.to_dto(draft)
            async with self.table() as table:
                await table.put_item(Item=dto.to_item())
            return self.to_domain(dto)

    async def update(self, entity: EntityT) -> None:
        """
        Replace the stored row with ``entity``.

        The whole row is replaced: attributes missing from ``entity`` are
        removed. ``created_on`` is kept from the input and
        ``last_updated_on`` is set to now.
        """
        with self._operation("update"):
            replacement = entity.model_copy(update={"last_updated_on": self.clock()})
            dto = self.to_dto(replacement)
            async with self.table() as table:
                await table.put_item(Item=dto.to_item())

    async def delete(self, client_id: str, entity_id: str) -> None:
        """Delete one row. Deleting a missing row succeeds."""
        with self._operation("delete"):
            key = build_key(client_id, self.entity_tag, entity_id)
            async with self.table() as table:
                await table.delete_item(Key=key)
