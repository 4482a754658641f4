from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from ..core.database import Base, AuditMixin


class Board(AuditMixin, Base):
    """Board model, owned by a department"""
    __tablename__ = "boards"

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    board_type = Column(Integer, default=0, nullable=False)
    is_private = Column(Boolean, default=False, nullable=False)

    department_id = Column(
        Uuid,
        ForeignKey("departments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    department = relationship("Department", back_populates="boards")
    columns = relationship(
        "BoardColumn",
        back_populates="board",
        cascade="all, delete-orphan"
    )
    board_users = relationship(
        "BoardUser",
        back_populates="board",
        cascade="all, delete-orphan"
    )
    board_user_roles = relationship(
        "BoardUserRole",
        back_populates="board",
        cascade="all, delete-orphan"
    )
    tasks = relationship(
        "Task",
        back_populates="board",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Board(id={self.id}, name='{self.name}')>"


class BoardColumn(AuditMixin, Base):
    """Workflow column of a board"""
    __tablename__ = "board_columns"

    name = Column(String(100), nullable=False)
    position = Column(Integer, default=0, nullable=False)

    board_id = Column(
        Uuid,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    board = relationship("Board", back_populates="columns")


class BoardUser(AuditMixin, Base):
    """Membership of a user on a board"""
    __tablename__ = "board_users"

    board_id = Column(Uuid, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    board = relationship("Board", back_populates="board_users")


class BoardUserRole(AuditMixin, Base):
    """Role granted to a user on a specific board"""
    __tablename__ = "board_user_roles"

    board_id = Column(Uuid, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role_id = Column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False, index=True)

    board = relationship("Board", back_populates="board_user_roles")
