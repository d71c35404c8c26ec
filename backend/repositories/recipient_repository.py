"""
Recipient repository for recipient data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import Recipient
from .base_repository import UserOwnedRepository


class RecipientRepository(UserOwnedRepository[Recipient]):
    """Repository for Recipient model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Recipient)

    def get_verified_for_user(self, user_id: str, recipient_id: str) -> Optional[Recipient]:
        """
        Retrieve one of the user's recipients only if it has been verified.

        Args:
            user_id: Owner's user ID
            recipient_id: Recipient UUID

        Returns:
            Verified recipient, or None if missing, foreign or unverified
        """
        return self.db.query(self.model).filter(
            self.model.id == recipient_id,
            self.model.user_id == user_id,
            self.model.email_verified_at.isnot(None)
        ).first()

    def email_taken_by_user(self, user_id: str, email: str) -> bool:
        return self.db.query(self.model).filter(
            self.model.user_id == user_id,
            self.model.email == email
        ).count() > 0
