"""
Transfer objects and view models for users and their accounts.
"""
import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from .base import AuditedDto, ViewModel


class UserCreate(BaseModel):
    """Schema for creating a user"""
    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")
    email: EmailStr = Field(..., description="Unique e-mail address")


class UserDto(UserCreate, AuditedDto):
    """Full user record"""
    pass


class UserViewModel(ViewModel):
    first_name: str
    last_name: str
    email: EmailStr


class UserDepartmentCreate(BaseModel):
    """Schema for adding a user to a department"""
    user_id: uuid.UUID = Field(..., description="Member")
    department_id: uuid.UUID = Field(..., description="Department")


class UserDepartmentDto(UserDepartmentCreate, AuditedDto):
    pass


class UserDepartmentViewModel(ViewModel):
    user_id: uuid.UUID
    department_id: uuid.UUID


BCRYPT_MAX_BYTES = 72


def check_password_bytes(value: Optional[str]) -> Optional[str]:
    """bcrypt ignores everything past 72 bytes, not characters"""
    if value is not None and len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
    return value


class CredentialCreate(BaseModel):
    """Schema for creating a credential; the password is stored hashed"""
    user_id: uuid.UUID = Field(..., description="Owning user")
    login: str = Field(..., min_length=1, max_length=100, description="Unique login")
    password: str = Field(..., min_length=8, max_length=72, description="Plain-text password")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_bytes(value)


class CredentialDto(AuditedDto):
    """Full credential record, without the password hash"""
    user_id: uuid.UUID = Field(..., description="Owning user")
    login: str = Field(..., min_length=1, max_length=100, description="Unique login")


class CredentialUpdate(AuditedDto):
    """Schema for updating a credential; omit the password to keep it"""
    user_id: uuid.UUID = Field(..., description="Owning user")
    login: str = Field(..., min_length=1, max_length=100, description="Unique login")
    password: Optional[str] = Field(None, min_length=8, max_length=72, description="New password")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_bytes(value)


class CredentialViewModel(ViewModel):
    login: str


class CredentialHistoryDto(AuditedDto):
    credential_id: uuid.UUID = Field(..., description="Credential whose password changed")


class CredentialHistoryViewModel(ViewModel):
    credential_id: uuid.UUID
    creation_date: Optional[datetime] = None


class NotificationSettingCreate(BaseModel):
    """Schema for creating a notification setting"""
    user_id: uuid.UUID = Field(..., description="Owning user")
    channel: str = Field(..., min_length=1, max_length=50, description="Delivery channel")
    is_enabled: bool = Field(True, description="Whether notifications are sent")


class NotificationSettingDto(NotificationSettingCreate, AuditedDto):
    pass


class NotificationSettingViewModel(ViewModel):
    channel: str
    is_enabled: bool


class TelegramAccountCreate(BaseModel):
    """Schema for linking a Telegram chat"""
    user_id: uuid.UUID = Field(..., description="Owning user")
    chat_id: int = Field(..., description="Telegram chat identifier")
    username: Optional[str] = Field(None, max_length=100, description="Telegram username")


class TelegramAccountDto(TelegramAccountCreate, AuditedDto):
    pass


class TelegramAccountViewModel(ViewModel):
    chat_id: int
    username: Optional[str] = None
