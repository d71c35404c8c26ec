"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """
        Add a new record and flush so generated columns are populated.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: T) -> T:
        """
        Flush pending changes on an existing record.

        Args:
            obj: Model instance with updated values

        Returns:
            Updated model instance
        """
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self.db.flush()


class UserOwnedRepository(BaseRepository[T]):
    """
    Repository for models carrying a user_id column.

    Every lookup is scoped to the owning user so one user's rows are never
    visible to another.
    """

    def get_for_user(self, user_id: str, id: str) -> Optional[T]:
        """
        Retrieve a record by ID only if it belongs to the user.

        Args:
            user_id: Owner's user ID
            id: Primary key value

        Returns:
            Model instance or None if missing or owned by someone else
        """
        return self.db.query(self.model).filter(
            self.model.id == id,
            self.model.user_id == user_id
        ).first()

    def list_for_user(self, user_id: str) -> List[T]:
        """
        List the user's records, newest first.

        Args:
            user_id: Owner's user ID
        """
        return self.db.query(self.model).filter(
            self.model.user_id == user_id
        ).order_by(self.model.created_at.desc()).all()
