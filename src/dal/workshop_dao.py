"""Workshop DAO."""

from src.dal.base import BaseDao
from src.dal.dtos import WorkshopDto
from src.dal.keys import EntityTag
from src.dal.mappers import workshop_to_domain, workshop_to_dto
from src.models.workshop import Workshop


class WorkshopDao(BaseDao[Workshop]):
    """CRUD access to Workshop rows (sort key ``WORKSHOP#<id>``)."""

    entity_tag = EntityTag.WORKSHOP
    dto_class = WorkshopDto
    id_field = "workshop_id"

    def to_domain(self, dto: WorkshopDto) -> Workshop:
        return workshop_to_domain(dto)

    def to_dto(self, entity: Workshop) -> WorkshopDto:
        return workshop_to_dto(entity)
