"""Location DAO."""

from src.dal.base import BaseDao
from src.dal.dtos import LocationDto
from src.dal.keys import EntityTag
from src.dal.mappers import location_to_domain, location_to_dto
from src.models.location import Location


class LocationDao(BaseDao[Location]):
    """CRUD access to Location rows (sort key ``LOCATION#<id>``)."""

    entity_tag = EntityTag.LOCATION
    dto_class = LocationDto
    id_field = "location_id"

    def to_domain(self, dto: LocationDto) -> Location:
        return location_to_domain(dto)

    def to_dto(self, entity: Location) -> LocationDto:
        return location_to_dto(entity)
