"""
Key design for the single wide-row table.

Every entity kind lives in the same table. Rows are addressed by
``(partitionKey, sortKey)`` where the partition is the client id and the
sort key is ``<entity tag><id>``. Foreign keys to other entity kinds are
stored tagged the same way. This module owns the tags and the only code
that adds or removes them.
"""

from enum import Enum
from typing import Any

PARTITION_KEY = "partitionKey"
SORT_KEY = "sortKey"


class EntityTag(str, Enum):
    """Sort-key prefixes of the entity kinds stored in the table."""

    WORKSHOP = "WORKSHOP#"
    LOCATION = "LOCATION#"
    ORGANIZER = "ORGANIZER#"


def _check_disjoint_prefixes() -> None:
    tags = [tag.value for tag in EntityTag]
    for tag in tags:
        for other in tags:
            if tag != other and other.startswith(tag):
                raise RuntimeError(f"Entity tag {tag!r} is a prefix of {other!r}")


_check_disjoint_prefixes()


def build_key(partition: str, tag: EntityTag, entity_id: str) -> dict[str, Any]:
    """
    Build the DynamoDB key of one row.

    Args:
        partition: Client id
        tag: Entity kind of the row
        entity_id: Bare (untagged) entity id

    Returns:
        Key dict usable with get_item/delete_item
    """
    return {PARTITION_KEY: partition, SORT_KEY: tag.value + entity_id}


def strip_tag(value: str | None, tag: EntityTag) -> str | None:
    """
    Remove one leading occurrence of ``tag`` from ``value``.

    Values without the tag, and None, are returned unchanged.
    """
    if value is None or not value.startswith(tag.value):
        return value
    return value[len(tag.value):]


def add_tag(value: str | None, tag: EntityTag) -> str | None:
    """
    Prefix a bare id with ``tag``.

    Empty and missing ids stay missing so optional references are either
    absent or tagged in storage.
    """
    if not value:
        return None
    return tag.value + value


def has_known_tag(value: str | None) -> bool:
    """Return True if ``value`` starts with any known entity tag."""
    if not value:
        return False
    return any(value.startswith(tag.value) for tag in EntityTag)
