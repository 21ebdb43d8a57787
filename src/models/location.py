"""Location domain model."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from src.models.base import DomainModel


class Location(DomainModel):
    """A venue where workshops take place."""

    client_id: str = Field(..., min_length=1, description="Client id (partition)")
    location_id: Optional[str] = Field(None, description="Location id")
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    created_on: Optional[datetime] = None
    last_updated_on: Optional[datetime] = None
