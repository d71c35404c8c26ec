"""
Domain repository for custom-domain data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import Domain
from .base_repository import UserOwnedRepository


class DomainRepository(UserOwnedRepository[Domain]):
    """Repository for Domain model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Domain)

    def get_by_name_for_user(self, user_id: str, domain: str) -> Optional[Domain]:
        """
        Find one of the user's domains by its (lower-case) name.

        Args:
            user_id: Owner's user ID
            domain: Normalized domain name

        Returns:
            Domain instance or None
        """
        return self.db.query(self.model).filter(
            self.model.user_id == user_id,
            self.model.domain == domain
        ).first()

    def name_taken_by_user(self, user_id: str, domain: str) -> bool:
        return self.get_by_name_for_user(user_id, domain) is not None

    def set_active(self, domain: Domain, active: bool) -> Domain:
        """
        Toggle the active flag.

        Args:
            domain: Domain to change
            active: New flag value

        Returns:
            Updated domain
        """
        domain.active = active
        return self.update(domain)
