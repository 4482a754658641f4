from sqlalchemy import Column, String, Boolean, BigInteger, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from ..core.database import Base, AuditMixin


class User(AuditMixin, Base):
    """User model"""
    __tablename__ = "users"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class UserDepartment(AuditMixin, Base):
    """Membership of a user in a department"""
    __tablename__ = "user_departments"

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    department_id = Column(
        Uuid,
        ForeignKey("departments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    department = relationship("Department", back_populates="user_departments")


class Credential(AuditMixin, Base):
    """Login credential of a user"""
    __tablename__ = "credentials"

    login = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    history = relationship(
        "CredentialHistory",
        back_populates="credential",
        cascade="all, delete-orphan"
    )


class CredentialHistory(AuditMixin, Base):
    """Previous password hash of a credential"""
    __tablename__ = "credential_histories"

    password_hash = Column(String(255), nullable=False)

    credential_id = Column(
        Uuid,
        ForeignKey("credentials.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    credential = relationship("Credential", back_populates="history")


class NotificationSetting(AuditMixin, Base):
    """Per-channel notification preference of a user"""
    __tablename__ = "notification_settings"

    channel = Column(String(50), nullable=False)
    is_enabled = Column(Boolean, default=True, nullable=False)

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)


class TelegramAccount(AuditMixin, Base):
    """Telegram chat linked to a user"""
    __tablename__ = "telegram_accounts"

    chat_id = Column(BigInteger, unique=True, nullable=False)
    username = Column(String(100), nullable=True)

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
