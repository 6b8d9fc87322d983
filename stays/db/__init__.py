"""
Database init - Declarative base for the SQL store
"""

from .base import Base, TimestampMixin

__all__ = ["Base", "TimestampMixin"]
