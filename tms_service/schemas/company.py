"""
Transfer objects and view models for companies and departments.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from .base import AuditedDto, ViewModel


class CompanyCreate(BaseModel):
    """Schema for creating a company"""
    name: str = Field(..., min_length=1, max_length=255, description="Company name")
    description: Optional[str] = Field(None, description="Company description")


class CompanyDto(CompanyCreate, AuditedDto):
    """Full company record"""
    pass


class CompanyViewModel(ViewModel):
    name: str


class DepartmentCreate(BaseModel):
    """Schema for creating a department"""
    name: str = Field(..., min_length=1, max_length=255, description="Department name")
    description: Optional[str] = Field(None, description="Department description")
    company_id: uuid.UUID = Field(..., description="Owning company")


class DepartmentDto(DepartmentCreate, AuditedDto):
    """Full department record"""
    pass


class DepartmentViewModel(ViewModel):
    name: str
    description: Optional[str] = None
