"""Organizer domain model."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from src.models.base import DomainModel


class Organizer(DomainModel):
    """A person or team running workshops."""

    client_id: str = Field(..., min_length=1, description="Client id (partition)")
    organizer_id: Optional[str] = Field(None, description="Organizer id")
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    created_on: Optional[datetime] = None
    last_updated_on: Optional[datetime] = None
