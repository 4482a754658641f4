"""
Shared pieces of the transfer objects.
"""
import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AuditedDto(BaseModel):
    """Identity and audit fields carried by every full-record DTO.

    Audit fields are filled in by the store; values sent by clients are
    ignored on update.
    """
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(..., description="Record identifier")
    creation_date: Optional[datetime] = Field(None, description="Creation timestamp")
    update_date: Optional[datetime] = Field(None, description="Last update timestamp")
    delete_date: Optional[datetime] = Field(None, description="Soft-delete timestamp")


class ViewModel(BaseModel):
    """Base for HTTP-facing projections of a DTO"""
    model_config = ConfigDict(from_attributes=True)
