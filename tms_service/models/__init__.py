"""Database models for the Task Management Service."""
from .company import Company, Department
from .board import Board, BoardColumn, BoardUser, BoardUserRole
from .task import TaskType, Task, Comment
from .user import (
    User, UserDepartment, Credential, CredentialHistory,
    NotificationSetting, TelegramAccount
)
from .role import Role, Permission, RolePermission

__all__ = [
    "Company", "Department",
    "Board", "BoardColumn", "BoardUser", "BoardUserRole",
    "TaskType", "Task", "Comment",
    "User", "UserDepartment", "Credential", "CredentialHistory",
    "NotificationSetting", "TelegramAccount",
    "Role", "Permission", "RolePermission",
]
