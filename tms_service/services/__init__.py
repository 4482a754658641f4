"""Service layer for the Task Management Service."""
from .errors import EntityNotFoundError, RelatedEntityNotFoundError
from .crud import CrudService
from .credentials import CredentialService

__all__ = [
    "CrudService",
    "CredentialService",
    "EntityNotFoundError",
    "RelatedEntityNotFoundError",
]
