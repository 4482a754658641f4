"""
Transfer objects and view models for roles and permissions.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from .base import AuditedDto, ViewModel


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Role name")
    description: Optional[str] = Field(None, description="Role description")


class RoleDto(RoleCreate, AuditedDto):
    pass


class RoleViewModel(ViewModel):
    name: str
    description: Optional[str] = None


class PermissionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Permission name")
    description: Optional[str] = Field(None, description="Permission description")


class PermissionDto(PermissionCreate, AuditedDto):
    pass


class PermissionViewModel(ViewModel):
    name: str
    description: Optional[str] = None


class RolePermissionCreate(BaseModel):
    """Schema for granting a permission to a role"""
    role_id: uuid.UUID = Field(..., description="Role")
    permission_id: uuid.UUID = Field(..., description="Granted permission")


class RolePermissionDto(RolePermissionCreate, AuditedDto):
    pass


class RolePermissionViewModel(ViewModel):
    role_id: uuid.UUID
    permission_id: uuid.UUID
