"""Pydantic schemas for the Task Management Service."""
