"""Core modules for the Task Management Service."""
