"""
Errors raised by the service layer.
"""
import uuid


class EntityNotFoundError(Exception):
    """Raised when a write targets a record that does not exist or is deleted"""

    def __init__(self, entity: str, entity_id: uuid.UUID):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found.")


class RelatedEntityNotFoundError(Exception):
    """Raised when a foreign key does not point at an active parent record"""

    def __init__(self, entity: str, entity_id: uuid.UUID, field: str):
        self.entity = entity
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity} with id {entity_id} referenced by '{field}' not found.")
