"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository, UserOwnedRepository
from .domain_repository import DomainRepository
from .recipient_repository import RecipientRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserOwnedRepository",
    "DomainRepository",
    "RecipientRepository",
    "UserRepository",
]
