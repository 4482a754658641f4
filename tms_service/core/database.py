import logging
import uuid
from datetime import datetime, timezone
from typing import Generator
from fastapi import Request
from sqlalchemy import Column, DateTime, Uuid, create_engine, event, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """Identity and audit columns shared by every entity"""

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    creation_date = Column(DateTime(timezone=True), nullable=False)
    update_date = Column(DateTime(timezone=True), nullable=True)
    delete_date = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.delete_date is not None


@event.listens_for(Session, "before_flush")
def stamp_audit_fields(session, flush_context, instances):
    """Assign audit timestamps for every pending write"""
    now = utcnow()
    for obj in session.new:
        if isinstance(obj, AuditMixin) and obj.creation_date is None:
            obj.creation_date = now
    for obj in session.dirty:
        if isinstance(obj, AuditMixin) and session.is_modified(obj, include_collections=False):
            obj.update_date = now


class Database:
    """Engine and session factory built from explicit settings"""

    def __init__(self, settings: Settings):
        self.settings = settings

        if settings.is_sqlite:
            # In-memory and file databases share one connection across threads
            self.engine = create_engine(
                settings.database_url,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
                echo=settings.sql_echo
            )
        else:
            self.engine = create_engine(
                settings.database_url,
                poolclass=QueuePool,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=True,
                pool_recycle=settings.db_pool_recycle,
                echo=settings.sql_echo
            )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        event.listen(self.engine, "connect", self._on_connect)
        event.listen(self.engine, "checkout", self._on_checkout)

    def _on_connect(self, dbapi_connection, connection_record):
        """Event listener for database connections"""
        if self.settings.is_sqlite:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.info("Database connection established")

    def _on_checkout(self, dbapi_connection, connection_record, connection_proxy):
        """Event listener for connection checkout"""
        logger.debug("Database connection checked out from pool")

    def session(self) -> Session:
        return self.SessionLocal()

    def init_db(self) -> bool:
        """
        Create all tables from the model metadata

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            # Import all models here to ensure they are registered
            from .. import models  # noqa: F401

            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created successfully")
            return True
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            return False

    def check_connection(self) -> bool:
        """
        Check database connectivity

        Returns:
            bool: True if connected, False otherwise
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            logger.debug("Database connection check successful")
            return True
        except Exception as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI

    Yields:
        Session: Database session bound to the application's database
    """
    db = request.app.state.database.session()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()
