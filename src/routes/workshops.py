"""API routes for workshop records."""

from fastapi import APIRouter, Depends, Response, status

from src.dal.workshop_dao import WorkshopDao
from src.exceptions import NotFoundError
from src.models.workshop import Workshop

router = APIRouter(prefix="/workshops", tags=["Workshops"])


def get_workshop_dao() -> WorkshopDao:
    return WorkshopDao()


@router.get("/{client_id}", response_model=list[Workshop])
async def list_workshops(
    client_id: str, dao: WorkshopDao = Depends(get_workshop_dao)
) -> list[Workshop]:
    """List all workshops of a client, in no particular order."""
    return await dao.read_all(client_id)


@router.get("/{client_id}/{workshop_id}", response_model=Workshop)
async def get_workshop(
    client_id: str, workshop_id: str, dao: WorkshopDao = Depends(get_workshop_dao)
) -> Workshop:
    """
    Get one workshop.

    Raises:
        NotFoundError: If the workshop does not exist (404)
    """
    workshop = await dao.read(client_id, workshop_id)
    if workshop is None:
        raise NotFoundError(message="Workshop not found", resource_id=workshop_id)
    return workshop


@router.post("", response_model=Workshop, status_code=status.HTTP_201_CREATED)
async def create_workshop(
    workshop: Workshop, dao: WorkshopDao = Depends(get_workshop_dao)
) -> Workshop:
    """Create a workshop; any id or timestamps in the body are replaced."""
    return await dao.create(workshop)


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
async def update_workshop(
    workshop: Workshop, dao: WorkshopDao = Depends(get_workshop_dao)
) -> Response:
    """Replace a stored workshop with the request body."""
    await dao.update(workshop)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{client_id}/{workshop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workshop(
    client_id: str, workshop_id: str, dao: WorkshopDao = Depends(get_workshop_dao)
) -> Response:
    """Delete a workshop. Deleting a missing workshop succeeds."""
    await dao.delete(client_id, workshop_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
