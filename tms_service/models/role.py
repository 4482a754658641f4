from sqlalchemy import Column, String, Text, ForeignKey, Uuid
from ..core.database import Base, AuditMixin


class Role(AuditMixin, Base):
    __tablename__ = "roles"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class Permission(AuditMixin, Base):
    __tablename__ = "permissions"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class RolePermission(AuditMixin, Base):
    """Permission granted to a role"""
    __tablename__ = "role_permissions"

    role_id = Column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False, index=True)
    permission_id = Column(
        Uuid,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
