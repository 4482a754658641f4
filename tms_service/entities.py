"""
Registry of the entities exposed over HTTP.

Each ``EntityDefinition`` binds a model to its transfer objects, its view
model, its route segment and its delete policy. The router factory and the
generic service are driven entirely by these definitions.
"""
from typing import List, Optional, Type
from pydantic import BaseModel

from . import models
from .schemas import board, company, role, task, user
from .services import CrudService, CredentialService


class EntityDefinition:
    """Description of one CRUD-exposed entity"""

    def __init__(
        self,
        name: str,
        model: type,
        dto_schema: Type[BaseModel],
        view_schema: Type[BaseModel],
        create_schema: Optional[Type[BaseModel]] = None,
        update_schema: Optional[Type[BaseModel]] = None,
        soft_delete: bool = True,
        service_class: Type[CrudService] = CrudService,
    ):
        self.name = name
        self.model = model
        self.dto_schema = dto_schema
        self.view_schema = view_schema
        self.create_schema = create_schema
        self.update_schema = update_schema or dto_schema
        self.soft_delete = soft_delete
        self.service_class = service_class

    @property
    def label(self) -> str:
        return self.model.__name__

    @property
    def read_only(self) -> bool:
        """Read-only entities are written as a side effect of other entities"""
        return self.create_schema is None

    def service(self, db) -> CrudService:
        return self.service_class(self, db)

    def __repr__(self):
        return f"<EntityDefinition(name='{self.name}', model={self.label})>"


ENTITIES: List[EntityDefinition] = [
    EntityDefinition(
        "company", models.Company,
        create_schema=company.CompanyCreate,
        dto_schema=company.CompanyDto,
        view_schema=company.CompanyViewModel,
        soft_delete=False,
    ),
    EntityDefinition(
        "department", models.Department,
        create_schema=company.DepartmentCreate,
        dto_schema=company.DepartmentDto,
        view_schema=company.DepartmentViewModel,
    ),
    EntityDefinition(
        "board", models.Board,
        create_schema=board.BoardCreate,
        dto_schema=board.BoardDto,
        view_schema=board.BoardViewModel,
    ),
    EntityDefinition(
        "column", models.BoardColumn,
        create_schema=board.BoardColumnCreate,
        dto_schema=board.BoardColumnDto,
        view_schema=board.BoardColumnViewModel,
    ),
    EntityDefinition(
        "boarduser", models.BoardUser,
        create_schema=board.BoardUserCreate,
        dto_schema=board.BoardUserDto,
        view_schema=board.BoardUserViewModel,
    ),
    EntityDefinition(
        "boarduserrole", models.BoardUserRole,
        create_schema=board.BoardUserRoleCreate,
        dto_schema=board.BoardUserRoleDto,
        view_schema=board.BoardUserRoleViewModel,
    ),
    EntityDefinition(
        "tasktype", models.TaskType,
        create_schema=task.TaskTypeCreate,
        dto_schema=task.TaskTypeDto,
        view_schema=task.TaskTypeViewModel,
    ),
    EntityDefinition(
        "task", models.Task,
        create_schema=task.TaskCreate,
        dto_schema=task.TaskDto,
        view_schema=task.TaskViewModel,
    ),
    EntityDefinition(
        "comment", models.Comment,
        create_schema=task.CommentCreate,
        dto_schema=task.CommentDto,
        view_schema=task.CommentViewModel,
    ),
    EntityDefinition(
        "user", models.User,
        create_schema=user.UserCreate,
        dto_schema=user.UserDto,
        view_schema=user.UserViewModel,
    ),
    EntityDefinition(
        "userdepartment", models.UserDepartment,
        create_schema=user.UserDepartmentCreate,
        dto_schema=user.UserDepartmentDto,
        view_schema=user.UserDepartmentViewModel,
    ),
    EntityDefinition(
        "credential", models.Credential,
        create_schema=user.CredentialCreate,
        update_schema=user.CredentialUpdate,
        dto_schema=user.CredentialDto,
        view_schema=user.CredentialViewModel,
        service_class=CredentialService,
    ),
    EntityDefinition(
        "credentialhistory", models.CredentialHistory,
        dto_schema=user.CredentialHistoryDto,
        view_schema=user.CredentialHistoryViewModel,
    ),
    EntityDefinition(
        "notificationsetting", models.NotificationSetting,
        create_schema=user.NotificationSettingCreate,
        dto_schema=user.NotificationSettingDto,
        view_schema=user.NotificationSettingViewModel,
    ),
    EntityDefinition(
        "telegramaccount", models.TelegramAccount,
        create_schema=user.TelegramAccountCreate,
        dto_schema=user.TelegramAccountDto,
        view_schema=user.TelegramAccountViewModel,
    ),
    EntityDefinition(
        "role", models.Role,
        create_schema=role.RoleCreate,
        dto_schema=role.RoleDto,
        view_schema=role.RoleViewModel,
    ),
    EntityDefinition(
        "permission", models.Permission,
        create_schema=role.PermissionCreate,
        dto_schema=role.PermissionDto,
        view_schema=role.PermissionViewModel,
    ),
    EntityDefinition(
        "rolepermission", models.RolePermission,
        create_schema=role.RolePermissionCreate,
        dto_schema=role.RolePermissionDto,
        view_schema=role.RolePermissionViewModel,
    ),
]


def get_entity(name: str) -> EntityDefinition:
    for definition in ENTITIES:
        if definition.name == name:
            return definition
    raise KeyError(name)
