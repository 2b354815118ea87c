"""
Base repository pattern implementation for database operations.

This module provides a generic repository that gives uniform CRUD access
to one model. Concrete repositories bind it to a model class and add
nothing else. Each operation runs in its own transaction on a session
obtained from the injected Database handle.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from gestioncommande.database.db import Database
from gestioncommande.exceptions import EntityNotFoundError
from gestioncommande.models.base import Base
from gestioncommande.utils.logger import get_logger

# Type variable for the model
T = TypeVar('T', bound=Base)

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 20


@dataclass
class Page(Generic[T]):
    """
    One page of records plus the total number of records.

    Attributes:
        items (List[T]): Records on this page
        page (int): Zero-based page index
        size (int): Requested page size
        total (int): Total number of records across all pages
    """
    items: List[T] = field(default_factory=list)
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages


class BaseRepository(Generic[T]):
    """
    Generic repository for database operations.

    This class provides CRUD operations for any SQLAlchemy model keyed by
    an integer ``id`` column.

    Attributes:
        database (Database): Open database handle
        model (Type[T]): SQLAlchemy model class
    """

    def __init__(self, database: Database, model: Type[T]):
        """
        Initialize the repository with a database handle and model class.

        Args:
            database (Database): Database handle, opened by the caller
            model (Type[T]): SQLAlchemy model class
        """
        self.database = database
        self.model = model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def _parse_sort(self, sort: Optional[str]) -> list:
        """
        Turn ``"column"`` or ``"column,desc"`` into ORDER BY clauses.

        The primary key is always appended so paging is stable.
        """
        if not sort:
            return [self.model.id.asc()]

        name, _, direction = sort.partition(",")
        name = name.strip()
        direction = direction.strip().lower() or "asc"
        if name not in self.model.__table__.columns:
            raise ValueError(f"Unknown sort column for {self.model_name}: {name}")
        if direction not in ("asc", "desc"):
            raise ValueError(f"Unknown sort direction: {direction}")

        column = getattr(self.model, name)
        clauses = [column.desc() if direction == "desc" else column.asc()]
        if name != "id":
            clauses.append(self.model.id.asc())
        return clauses

    def _require(self, session: Session, id: Any) -> T:
        db_item = session.get(self.model, id)
        if db_item is None:
            logger.warning(f"{self.model_name} {id} not found")
            raise EntityNotFoundError(self.model_name, id)
        return db_item

    def save(self, entity: T) -> T:
        """
        Insert a new record or update the existing one with the same id.

        Args:
            entity (T): Model instance, with or without an id

        Returns:
            T: Persisted model instance with its id assigned
        """
        with self.database.session_scope() as session:
            db_item = session.merge(entity)
            session.flush()
        logger.debug(f"Saved {self.model_name} {db_item.id}")
        return db_item

    def save_all(self, entities: Iterable[T]) -> List[T]:
        """
        Save several records in a single transaction.

        Args:
            entities (Iterable[T]): Model instances

        Returns:
            List[T]: Persisted instances, in input order
        """
        db_items = []
        with self.database.session_scope() as session:
            for entity in entities:
                db_items.append(session.merge(entity))
                # A repeated id must find the row written for its first occurrence
                session.flush()
        logger.debug(f"Saved {len(db_items)} {self.model_name} records")
        return db_items

    def find_by_id(self, id: Any) -> Optional[T]:
        """
        Get a record by ID.

        Args:
            id (Any): Primary key value

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        with self.database.session_scope() as session:
            return session.get(self.model, id)

    def find_all(self, skip: int = 0, limit: Optional[int] = None,
                 sort: Optional[str] = None) -> List[T]:
        """
        Get all records, ordered by primary key unless ``sort`` is given.

        Args:
            skip (int): Number of records to skip
            limit (Optional[int]): Maximum number of records to return
            sort (Optional[str]): Column name with optional ``,asc`` or ``,desc``

        Returns:
            List[T]: List of model instances
        """
        stmt = select(self.model).order_by(*self._parse_sort(sort)).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self.database.session_scope() as session:
            return list(session.scalars(stmt).all())

    def find_all_by_id(self, ids: Iterable[Any]) -> List[T]:
        """
        Get the records whose ids are in ``ids``. Missing ids are skipped.

        Args:
            ids (Iterable[Any]): Primary key values

        Returns:
            List[T]: Found model instances ordered by id
        """
        ids = list(ids)
        if not ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(ids)).order_by(self.model.id)
        with self.database.session_scope() as session:
            return list(session.scalars(stmt).all())

    def find_page(self, page: int = 0, size: int = DEFAULT_PAGE_SIZE,
                  sort: Optional[str] = None) -> Page[T]:
        """
        Get one page of records together with the total record count.

        Args:
            page (int): Zero-based page index
            size (int): Page size
            sort (Optional[str]): Column name with optional ``,asc`` or ``,desc``

        Returns:
            Page[T]: The requested page
        """
        if page < 0:
            raise ValueError("page must not be negative")
        if size < 1:
            raise ValueError("size must be at least 1")

        stmt = (
            select(self.model)
            .order_by(*self._parse_sort(sort))
            .offset(page * size)
            .limit(size)
        )
        with self.database.session_scope() as session:
            total = session.scalar(select(func.count()).select_from(self.model))
            items = list(session.scalars(stmt).all())
        return Page(items=items, page=page, size=size, total=total)

    def exists_by_id(self, id: Any) -> bool:
        """
        Check whether a record exists without loading it.

        Args:
            id (Any): Primary key value

        Returns:
            bool: True if a record with this id exists
        """
        stmt = select(select(self.model.id).where(self.model.id == id).exists())
        with self.database.session_scope() as session:
            return bool(session.scalar(stmt))

    def count(self) -> int:
        """
        Count all records.

        Returns:
            int: Number of records
        """
        with self.database.session_scope() as session:
            return session.scalar(select(func.count()).select_from(self.model))

    def delete_by_id(self, id: Any) -> None:
        """
        Delete a record by ID.

        Args:
            id (Any): Primary key value

        Raises:
            EntityNotFoundError: If no record has this id
        """
        with self.database.session_scope() as session:
            session.delete(self._require(session, id))
        logger.debug(f"Deleted {self.model_name} {id}")

    def delete(self, entity: T) -> None:
        """
        Delete the record with the same id as ``entity``.

        Args:
            entity (T): Model instance with an id

        Raises:
            ValueError: If the entity has no id
            EntityNotFoundError: If no record has this id
        """
        if entity.id is None:
            raise ValueError(f"Cannot delete a {self.model_name} without an id")
        self.delete_by_id(entity.id)

    def delete_all_by_id(self, ids: Iterable[Any]) -> None:
        """
        Delete several records in a single transaction.

        Nothing is deleted if any id is missing.

        Args:
            ids (Iterable[Any]): Primary key values

        Raises:
            EntityNotFoundError: On the first id with no record
        """
        ids = list(ids)
        with self.database.session_scope() as session:
            for id in ids:
                session.delete(self._require(session, id))
        logger.debug(f"Deleted {len(ids)} {self.model_name} records")

    def delete_all(self, entities: Optional[Iterable[T]] = None) -> int:
        """
        Delete the given records, or every record when called without arguments.

        Args:
            entities (Optional[Iterable[T]]): Model instances with ids

        Returns:
            int: Number of records deleted

        Raises:
            ValueError: If one of the entities has no id
            EntityNotFoundError: If one of the entities has no record
        """
        if entities is None:
            with self.database.session_scope() as session:
                deleted = session.execute(delete(self.model)).rowcount
            logger.debug(f"Deleted all {deleted} {self.model_name} records")
            return deleted

        ids: Tuple[Any, ...] = tuple(entity.id for entity in entities)
        if any(id is None for id in ids):
            raise ValueError(f"Cannot delete a {self.model_name} without an id")
        self.delete_all_by_id(ids)
        return len(ids)
