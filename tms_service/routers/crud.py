import logging
import uuid
from typing import Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..entities import EntityDefinition
from ..services import CrudService, EntityNotFoundError, RelatedEntityNotFoundError

logger = logging.getLogger(__name__)


def build_crud_router(definition: EntityDefinition) -> APIRouter:
    """
    Build the GET/POST/PUT/DELETE routes of one entity.

    Args:
        definition: Entity to expose

    Returns:
        APIRouter: Router to mount under the entity's route segment
    """
    router = APIRouter()
    label = definition.label
    view_schema = definition.view_schema
    get_route_name = f"get_{definition.name}"

    def get_service(db: Session = Depends(get_db)) -> CrudService:
        return definition.service(db)

    def publish(request: Request, action: str, entity_id: uuid.UUID):
        request.app.state.events.publish_event(
            f"{definition.name}.{action}",
            {"id": str(entity_id), "entity": definition.name}
        )

    @router.get("/{entity_id}", response_model=view_schema, name=get_route_name)
    def get_entity(entity_id: uuid.UUID, service: CrudService = Depends(get_service)):
        """Get a record by ID"""
        logger.info(f"Request to get {label} with id {entity_id}")

        dto = service.get_by_id(entity_id)
        if dto is None:
            logger.warning(f"{label} with id {entity_id} not found")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{label} with id {entity_id} not found."
            )

        return view_schema.model_validate(dto.model_dump())

    if definition.read_only:
        return router

    create_schema = definition.create_schema
    update_schema = definition.update_schema

    @router.post("", response_model=view_schema, status_code=status.HTTP_201_CREATED)
    def create_entity(
        request: Request,
        response: Response,
        payload: Optional[create_schema] = Body(None),
        service: CrudService = Depends(get_service)
    ):
        """Create a new record"""
        if payload is None:
            logger.warning(f"Create {label} called with empty payload")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{label} data is required."
            )

        logger.info(f"Creating {label}")

        try:
            dto = service.create(payload)
        except RelatedEntityNotFoundError as e:
            logger.warning(f"Create {label} rejected: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        logger.info(f"{label} created with id {dto.id}")
        publish(request, "created", dto.id)

        response.headers["Location"] = str(request.url_for(get_route_name, entity_id=str(dto.id)))
        return view_schema.model_validate(dto.model_dump())

    @router.put("/{entity_id}", response_model=view_schema)
    def update_entity(
        request: Request,
        entity_id: uuid.UUID,
        payload: Optional[update_schema] = Body(None),
        service: CrudService = Depends(get_service)
    ):
        """Replace a record"""
        if payload is None:
            logger.warning(f"Update {label} called with empty payload")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{label} data is required."
            )

        if payload.id != entity_id:
            logger.warning(f"Update {label} id mismatch: route id {entity_id}, body id {payload.id}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="ID in the route and body must match."
            )

        logger.info(f"Updating {label} with id {entity_id}")

        try:
            dto = service.update(payload)
        except EntityNotFoundError as e:
            logger.warning(str(e))
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except RelatedEntityNotFoundError as e:
            logger.warning(f"Update {label} rejected: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        logger.info(f"{label} with id {entity_id} updated")
        publish(request, "updated", entity_id)

        return view_schema.model_validate(dto.model_dump())

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_entity(
        request: Request,
        entity_id: uuid.UUID,
        service: CrudService = Depends(get_service)
    ):
        """Delete a record"""
        logger.info(f"Deleting {label} with id {entity_id}")

        if service.delete(entity_id):
            logger.info(f"{label} with id {entity_id} deleted")
            publish(request, "deleted", entity_id)
        else:
            logger.info(f"{label} with id {entity_id} already gone, nothing deleted")

    return router
