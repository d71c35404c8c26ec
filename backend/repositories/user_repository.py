"""
User repository for account lookups.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_token_hash(self, token_hash: str) -> Optional[User]:
        return self.db.query(self.model).filter(self.model.api_token_hash == token_hash).first()

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(self.model).filter(self.model.username == username).first()
