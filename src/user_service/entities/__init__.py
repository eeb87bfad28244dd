"""Entities organized by business concept.

Each entity package colocates its domain model (entity.py), its persistence
model (table.py) and its data access layer (repository.py).
"""

from .user import User, UserCreate, UserRepository, UserTable, UserUpdate

__all__ = ["User", "UserCreate", "UserUpdate", "UserTable", "UserRepository"]
