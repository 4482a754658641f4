"""Task Management Service - CRUD backend for companies, boards and tasks."""

__version__ = "1.0.0"
