"""
Stored forms of the entities.

Field aliases are the attribute names in the table. Identifier fields
hold tagged values exactly as stored.
"""

from datetime import date, datetime, time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StoredRecord(BaseModel):
    """Attributes shared by every row of the table."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    partition_key: str
    sort_key: str
    created_on: Optional[datetime] = None
    last_updated_on: Optional[datetime] = None

    def to_item(self) -> dict[str, Any]:
        """
        Render the record as a DynamoDB item.

        Dates and times become ISO 8601 strings; missing attributes are
        left out so a put replaces the whole row.
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "StoredRecord":
        """Build the record from a DynamoDB item."""
        return cls.model_validate(item)


class WorkshopDto(StoredRecord):
    location_id: Optional[str] = None
    organizer_id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    workshop_date: Optional[date] = None
    start_time: Optional[time] = None
    duration: Optional[int] = Field(None, ge=0)


class LocationDto(StoredRecord):
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class OrganizerDto(StoredRecord):
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
