"""API routers for the Task Management Service."""
from fastapi import FastAPI

from ..entities import ENTITIES
from .crud import build_crud_router


def include_entity_routers(app: FastAPI, api_prefix: str) -> None:
    """Mount one CRUD router per registered entity under ``api_prefix``"""
    for definition in ENTITIES:
        app.include_router(
            build_crud_router(definition),
            prefix=f"{api_prefix}/{definition.name}",
            tags=[definition.name]
        )
