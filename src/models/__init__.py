"""Domain models for the Workshop Data API."""

from src.models.location import Location
from src.models.organizer import Organizer
from src.models.workshop import Workshop

__all__ = ["Workshop", "Location", "Organizer"]
