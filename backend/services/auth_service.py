"""
Auth Service

API token handling: tokens are random strings handed to the user once, only
their SHA-256 digest is stored.
"""

import hashlib
import logging
import secrets
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from exceptions import AuthenticationError, ValidationError
from models import User
from repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

TOKEN_BYTES = 40


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode('utf-8')).hexdigest()


def generate_token() -> str:
    return secrets.token_urlsafe(TOKEN_BYTES)


class AuthService:
    """Service for authenticating callers and provisioning users."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def authenticate(self, token: Optional[str]) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            AuthenticationError: If the token is missing or unknown
        """
        if not token:
            raise AuthenticationError()

        user = self.user_repo.get_by_token_hash(hash_token(token))
        if not user:
            raise AuthenticationError()
        return user

    def create_user(self, username: str) -> Tuple[User, str]:
        """
        Create a user with a fresh API token.

        Args:
            username: Unique username

        Returns:
            Tuple of (user, plain token); the plain token is not stored

        Raises:
            ValidationError: If the username is empty or already taken
        """
        username = (username or '').strip()
        if not username:
            raise ValidationError("Username is required", invalid_fields={'username': ["The username field is required."]})
        if self.user_repo.get_by_username(username):
            raise ValidationError("Username is taken", invalid_fields={'username': ["The username has already been taken."]})

        token = generate_token()
        user = self.user_repo.create(User(username=username, api_token_hash=hash_token(token)))
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Created user {user.username} ({user.id})")
        return user, token

    def rotate_token(self, username: str) -> str:
        """
        Replace a user's API token, invalidating the old one.

        Returns:
            The new plain token
        """
        user = self.user_repo.get_by_username(username)
        if not user:
            raise ValidationError("Unknown user", invalid_fields={'username': ["No user with that username."]})

        token = generate_token()
        user.api_token_hash = hash_token(token)
        self.user_repo.update(user)
        self.db.commit()
        logger.info(f"Rotated API token for {user.username}")
        return token
