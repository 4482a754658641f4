"""
Transfer objects and view models for tasks, task types and comments.
"""
import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .base import AuditedDto, ViewModel


class TaskTypeCreate(BaseModel):
    """Schema for creating a task type"""
    name: str = Field(..., min_length=1, max_length=100, description="Task type name")
    description: Optional[str] = Field(None, description="Task type description")


class TaskTypeDto(TaskTypeCreate, AuditedDto):
    pass


class TaskTypeViewModel(ViewModel):
    name: str
    description: Optional[str] = None


class TaskCreate(BaseModel):
    """Schema for creating a task"""
    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    due_date: Optional[datetime] = Field(None, description="Task due date")
    board_id: uuid.UUID = Field(..., description="Board the task lives on")
    column_id: Optional[uuid.UUID] = Field(None, description="Current board column")
    task_type_id: Optional[uuid.UUID] = Field(None, description="Task type")
    author_id: uuid.UUID = Field(..., description="User who created the task")
    assignee_id: Optional[uuid.UUID] = Field(None, description="User working on the task")


class TaskDto(TaskCreate, AuditedDto):
    """Full task record"""
    pass


class TaskViewModel(ViewModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None


class CommentCreate(BaseModel):
    """Schema for creating a comment"""
    text: str = Field(..., min_length=1, description="Comment text")
    user_id: uuid.UUID = Field(..., description="Comment author")
    task_id: uuid.UUID = Field(..., description="Commented task")


class CommentDto(CommentCreate, AuditedDto):
    pass


class CommentViewModel(ViewModel):
    text: str
