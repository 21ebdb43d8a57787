"""
Conversions between stored records and domain records.

These functions are the only place where entity tags are applied to or
removed from identifier fields. All other fields pass through unchanged.
"""

from src.dal.dtos import LocationDto, OrganizerDto, WorkshopDto
from src.dal.keys import EntityTag, add_tag, strip_tag
from src.models.location import Location
from src.models.organizer import Organizer
from src.models.workshop import Workshop


def _require_id(value: str | None, field_name: str) -> str:
    if not value:
        raise ValueError(f"{field_name} is required to address a stored row")
    return value


def workshop_to_domain(dto: WorkshopDto) -> Workshop:
    return Workshop(
        client_id=dto.partition_key,
        workshop_id=strip_tag(dto.sort_key, EntityTag.WORKSHOP),
        location_id=strip_tag(dto.location_id, EntityTag.LOCATION),
        organizer_id=strip_tag(dto.organizer_id, EntityTag.ORGANIZER),
        name=dto.name,
        category=dto.category,
        description=dto.description,
        workshop_date=dto.workshop_date,
        start_time=dto.start_time,
        duration=dto.duration,
        created_on=dto.created_on,
        last_updated_on=dto.last_updated_on,
    )


def workshop_to_dto(workshop: Workshop) -> WorkshopDto:
    """Raises ValueError when the workshop has no id yet."""
    workshop_id = _require_id(workshop.workshop_id, "workshop_id")
    return WorkshopDto(
        partition_key=workshop.client_id,
        sort_key=add_tag(workshop_id, EntityTag.WORKSHOP),
        location_id=add_tag(workshop.location_id, EntityTag.LOCATION),
        organizer_id=add_tag(workshop.organizer_id, EntityTag.ORGANIZER),
        name=workshop.name,
        category=workshop.category,
        description=workshop.description,
        workshop_date=workshop.workshop_date,
        start_time=workshop.start_time,
        duration=workshop.duration,
        created_on=workshop.created_on,
        last_updated_on=workshop.last_updated_on,
    )


def location_to_domain(dto: LocationDto) -> Location:
    return Location(
        client_id=dto.partition_key,
        location_id=strip_tag(dto.sort_key, EntityTag.LOCATION),
        name=dto.name,
        street=dto.street,
        city=dto.city,
        state=dto.state,
        zip_code=dto.zip_code,
        created_on=dto.created_on,
        last_updated_on=dto.last_updated_on,
    )


def location_to_dto(location: Location) -> LocationDto:
    location_id = _require_id(location.location_id, "location_id")
    return LocationDto(
        partition_key=location.client_id,
        sort_key=add_tag(location_id, EntityTag.LOCATION),
        name=location.name,
        street=location.street,
        city=location.city,
        state=location.state,
        zip_code=location.zip_code,
        created_on=location.created_on,
        last_updated_on=location.last_updated_on,
    )


def organizer_to_domain(dto: OrganizerDto) -> Organizer:
    return Organizer(
        client_id=dto.partition_key,
        organizer_id=strip_tag(dto.sort_key, EntityTag.ORGANIZER),
        name=dto.name,
        email=dto.email,
        phone_number=dto.phone_number,
        created_on=dto.created_on,
        last_updated_on=dto.last_updated_on,
    )


def organizer_to_dto(organizer: Organizer) -> OrganizerDto:
    organizer_id = _require_id(organizer.organizer_id, "organizer_id")
    return OrganizerDto(
        partition_key=organizer.client_id,
        sort_key=add_tag(organizer_id, EntityTag.ORGANIZER),
        name=organizer.name,
        email=organizer.email,
        phone_number=organizer.phone_number,
        created_on=organizer.created_on,
        last_updated_on=organizer.last_updated_on,
    )
