"""
Transfer objects and view models for boards, their columns and members.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from .base import AuditedDto, ViewModel


class BoardCreate(BaseModel):
    """Schema for creating a board"""
    name: str = Field(..., min_length=1, max_length=255, description="Board name")
    description: Optional[str] = Field(None, description="Board description")
    department_id: uuid.UUID = Field(..., description="Owning department")
    board_type: int = Field(0, ge=0, description="Board type code")
    is_private: bool = Field(False, description="Visible to board members only")


class BoardDto(BoardCreate, AuditedDto):
    """Full board record"""
    pass


class BoardViewModel(ViewModel):
    name: str
    description: Optional[str] = None
    board_type: int
    is_private: bool


class BoardColumnCreate(BaseModel):
    """Schema for creating a board column"""
    name: str = Field(..., min_length=1, max_length=100, description="Column name")
    position: int = Field(0, ge=0, description="Position of the column on the board")
    board_id: uuid.UUID = Field(..., description="Owning board")


class BoardColumnDto(BoardColumnCreate, AuditedDto):
    pass


class BoardColumnViewModel(ViewModel):
    name: str
    position: int


class BoardUserCreate(BaseModel):
    """Schema for adding a user to a board"""
    board_id: uuid.UUID = Field(..., description="Board")
    user_id: uuid.UUID = Field(..., description="Member")


class BoardUserDto(BoardUserCreate, AuditedDto):
    pass


class BoardUserViewModel(ViewModel):
    board_id: uuid.UUID
    user_id: uuid.UUID


class BoardUserRoleCreate(BaseModel):
    """Schema for granting a role to a board member"""
    board_id: uuid.UUID = Field(..., description="Board")
    user_id: uuid.UUID = Field(..., description="Member")
    role_id: uuid.UUID = Field(..., description="Granted role")


class BoardUserRoleDto(BoardUserRoleCreate, AuditedDto):
    pass


class BoardUserRoleViewModel(ViewModel):
    board_id: uuid.UUID
    user_id: uuid.UUID
    role_id: uuid.UUID
