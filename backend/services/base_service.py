"""
Base service with the transaction handling shared by the business services.
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from exceptions import DatabaseError


class BaseService:
    """Holds the session and commits on behalf of a service."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, operation: str) -> None:
        """
        Commit the current transaction, rolling back on failure.

        IntegrityError is re-raised unchanged so callers can map constraint
        violations to validation messages.

        Raises:
            DatabaseError: For any other database failure
        """
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(operation, str(e)) from e
