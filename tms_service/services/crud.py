"""
Generic CRUD service.

One ``CrudService`` instance serves one entity for the lifetime of a
request. The entity is described by an ``EntityDefinition`` (see
``tms_service.entities``), which supplies the SQLAlchemy model, the
transfer-object schemas and the delete policy.
"""
import logging
import uuid
from typing import Any, Dict, Optional, Set
from pydantic import BaseModel
from sqlalchemy import Table
from sqlalchemy.orm import Session

from ..core.database import Base, utcnow
from .errors import EntityNotFoundError, RelatedEntityNotFoundError

logger = logging.getLogger(__name__)

_models_by_table: Dict[str, type] = {}


def model_for_table(table: Table) -> type:
    """Resolve the mapped class persisted in ``table``"""
    if table.name not in _models_by_table:
        for mapper in Base.registry.mappers:
            _models_by_table[mapper.local_table.name] = mapper.class_
    return _models_by_table[table.name]


class CrudService:
    """Create, read, update and delete records of one entity"""

    def __init__(self, definition, db: Session):
        self.definition = definition
        self.model = definition.model
        self.db = db

    @property
    def writable_fields(self) -> Set[str]:
        return set(self.definition.create_schema.model_fields)

    def to_dto(self, record) -> BaseModel:
        return self.definition.dto_schema.model_validate(record, from_attributes=True)

    def get_by_id(self, entity_id: uuid.UUID) -> Optional[BaseModel]:
        """
        Get a record by its identifier.

        Soft-deleted records are still returned, with ``delete_date`` set.

        Returns:
            The record DTO, or None if no record has this identifier
        """
        record = self.db.get(self.model, entity_id)
        if record is None:
            return None
        return self.to_dto(record)

    def create(self, create_dto: BaseModel) -> BaseModel:
        """
        Insert a new record.

        Raises:
            RelatedEntityNotFoundError: if a foreign key has no active parent
        """
        self.check_references(create_dto.model_dump())

        record = self.model(**self.prepare_create(create_dto))
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        logger.debug(f"Inserted {self.definition.label} {record.id}")
        return self.to_dto(record)

    def update(self, dto: BaseModel) -> BaseModel:
        """
        Replace the writable attributes of an existing record.

        Audit fields present in ``dto`` are ignored.

        Raises:
            EntityNotFoundError: if the record is missing or soft-deleted
            RelatedEntityNotFoundError: if a foreign key has no active parent
        """
        record = self.db.get(self.model, dto.id)
        if record is None or record.is_deleted:
            raise EntityNotFoundError(self.definition.label, dto.id)

        self.check_references(dto.model_dump(), record)

        for field, value in self.prepare_update(record, dto).items():
            setattr(record, field, value)

        self.db.commit()
        self.db.refresh(record)
        return self.to_dto(record)

    def delete(self, entity_id: uuid.UUID) -> bool:
        """
        Delete a record, softly or physically depending on the entity.

        Unknown identifiers and already soft-deleted records are left alone.

        Returns:
            bool: True if a record was deleted by this call
        """
        record = self.db.get(self.model, entity_id)
        if record is None:
            logger.debug(f"{self.definition.label} {entity_id} does not exist, nothing to delete")
            return False

        if self.definition.soft_delete:
            if record.is_deleted:
                return False
            record.delete_date = utcnow()
        else:
            self.db.delete(record)

        self.db.commit()
        return True

    def prepare_create(self, create_dto: BaseModel) -> Dict[str, Any]:
        """Column values for a new record"""
        return create_dto.model_dump()

    def prepare_update(self, record, dto: BaseModel) -> Dict[str, Any]:
        """Column values to assign on an existing record"""
        return dto.model_dump(include=self.writable_fields)

    def check_references(self, values: Dict[str, Any], record=None) -> None:
        """
        Require every foreign key in ``values`` to name an active parent.

        When ``record`` is given, keys it already holds are not checked again,
        so children of a soft-deleted parent stay editable.
        """
        for foreign_key in self.model.__table__.foreign_keys:
            field = foreign_key.parent.name
            parent_id = values.get(field)
            if parent_id is None:
                continue
            if record is not None and getattr(record, field) == parent_id:
                continue

            parent_model = model_for_table(foreign_key.column.table)
            parent = self.db.get(parent_model, parent_id)
            if parent is None or parent.is_deleted:
                raise RelatedEntityNotFoundError(parent_model.__name__, parent_id, field)
