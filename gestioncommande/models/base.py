"""
Base model configuration for SQLAlchemy ORM.

This module defines the base declarative class that all model classes
inherit from. Entities compare equal when they share a class and a
non-null primary key.

Usage:
    from gestioncommande.models.base import Base

    class MyModel(Base):
        __tablename__ = "my_table"

        id = Column(Integer, primary_key=True)
        name = Column(String)
"""

from typing import Any, Dict

from sqlalchemy import inspect
from sqlalchemy.orm import declarative_base


class EntityMixin:
    """
    Identity-based equality and serialization shared by all entities.

    Two entities are equal when they share a class and a non-null id.
    The hash depends only on the class, so it stays stable when the
    database assigns an id. As a consequence all entities of one class
    share a hash bucket, and large sets or dicts of them degrade to
    linear lookups. Key such collections by ``id`` instead.
    """

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self):
        # Constant per class so the hash survives id assignment on save
        return hash(type(self))

    def to_dict(self) -> Dict[str, Any]:
        """Return column values keyed by attribute name."""
        return {
            column.key: getattr(self, column.key)
            for column in inspect(type(self)).column_attrs
        }


Base = declarative_base(cls=EntityMixin)
