"""Organizer DAO."""

from src.dal.base import BaseDao
from src.dal.dtos import OrganizerDto
from src.dal.keys import EntityTag
from src.dal.mappers import organizer_to_domain, organizer_to_dto
from src.models.organizer import Organizer


class OrganizerDao(BaseDao[Organizer]):
    """CRUD access to Organizer rows (sort key ``ORGANIZER#<id>``)."""

    entity_tag = EntityTag.ORGANIZER
    dto_class = OrganizerDto
    id_field = "organizer_id"

    def to_domain(self, dto: OrganizerDto) -> Organizer:
        return organizer_to_domain(dto)

    def to_dto(self, entity: Organizer) -> OrganizerDto:
        return organizer_to_dto(entity)
