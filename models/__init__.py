"""
Database models package for the Contact Manager API
Contains SQLAlchemy models for contact records
"""

from .base import Base, BaseModel
from .contact import Contact

__all__ = ['Base', 'BaseModel', 'Contact']
