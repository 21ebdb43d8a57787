"""Workshop domain model."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import Field

from src.models.base import DomainModel


class Workshop(DomainModel):
    """
    A workshop held by a client.

    Attributes:
        client_id: Owning client (table partition)
        workshop_id: Bare workshop id, minted on create
        location_id: Bare id of the location, if any
        organizer_id: Bare id of the organizer, if any
        name: Display name
        category: Free-form category
        description: Free-form description
        workshop_date: Calendar date, no zone
        start_time: Time of day, no zone
        duration: Length in minutes
        created_on: Set once on create
        last_updated_on: Bumped on every write
    """

    client_id: str = Field(..., min_length=1, description="Client id (partition)")
    workshop_id: Optional[str] = Field(None, description="Workshop id")
    location_id: Optional[str] = Field(None, description="Location id")
    organizer_id: Optional[str] = Field(None, description="Organizer id")
    name: Optional[str] = Field(None, description="Workshop name")
    category: Optional[str] = Field(None, description="Category")
    description: Optional[str] = Field(None, description="Description")
    workshop_date: Optional[date] = Field(None, description="Date of the workshop")
    start_time: Optional[time] = Field(None, description="Start time")
    duration: Optional[int] = Field(None, ge=0, description="Duration in minutes")
    created_on: Optional[datetime] = Field(None, description="Creation time")
    last_updated_on: Optional[datetime] = Field(None, description="Last update time")

    model_config = {
        "json_schema_extra": {
            "example": {
                "clientId": "C1",
                "workshopId": "Q2hZb8m6TqS0x1W4dKp3aA",
                "locationId": "L1",
                "organizerId": "O1",
                "name": "Intro",
                "category": "A",
                "description": "Introductory session",
                "workshopDate": "2025-03-14",
                "startTime": "09:00:00",
                "duration": 60,
                "createdOn": "2025-03-01T10:15:00",
                "lastUpdatedOn": "2025-03-01T10:15:00",
            }
        }
    }
