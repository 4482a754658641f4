from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from ..core.database import Base, AuditMixin


class TaskType(AuditMixin, Base):
    """Task type model (story, bug, ...)"""
    __tablename__ = "task_types"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class Task(AuditMixin, Base):
    """Task model for database"""
    __tablename__ = "tasks"

    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)

    board_id = Column(
        Uuid,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    column_id = Column(
        Uuid,
        ForeignKey("board_columns.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    task_type_id = Column(
        Uuid,
        ForeignKey("task_types.id", ondelete="SET NULL"),
        nullable=True
    )
    author_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    assignee_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    board = relationship("Board", back_populates="tasks")
    # Tasks are removed before their column when a board goes away
    column = relationship("BoardColumn")
    comments = relationship(
        "Comment",
        back_populates="task",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}')>"


class Comment(AuditMixin, Base):
    """Comment left by a user on a task"""
    __tablename__ = "comments"

    text = Column(Text, nullable=False)

    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    task_id = Column(
        Uuid,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    task = relationship("Task", back_populates="comments")
