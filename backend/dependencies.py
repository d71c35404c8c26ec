"""
Dependency injection providers for FastAPI.

This module provides factory functions for the authenticated caller and the
service instances used by the routers, so tests can override any of them.
"""

from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from config.app_config import APP_CONFIG
from constants import HTTPStatus
from database import get_db
from exceptions import AuthenticationError
from models import User
from services.auth_service import AuthService
from services.domain_service import DomainService
from services.recipient_service import RecipientService
from utils.logging_utils import set_logging_context

bearer_scheme = HTTPBearer(auto_error=False)


def get_local_domain() -> str:
    """The service's own reserved domain."""
    return APP_CONFIG.local_domain


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token on the request to a user.

    Raises:
        HTTPException: 401 if the token is missing or unknown
    """
    token = credentials.credentials if credentials else None
    try:
        return AuthService(db).authenticate(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"}
        )


async def get_current_user(user: User = Depends(authenticate)) -> User:
    """
    The authenticated caller.

    Runs on the event loop so the logging context it sets is inherited by
    the endpoint.
    """
    set_logging_context(user_id=user.id)
    return user


def get_domain_service(
    db: Session = Depends(get_db),
    local_domain: str = Depends(get_local_domain),
) -> DomainService:
    """
    Factory function for creating DomainService instances.

    Args:
        db: Database session (injected)
        local_domain: Reserved service domain (injected)

    Returns:
        DomainService bound to the request's session
    """
    return DomainService(db, local_domain)


def get_recipient_service(
    db: Session = Depends(get_db),
    local_domain: str = Depends(get_local_domain),
) -> RecipientService:
    """
    Factory function for creating RecipientService instances.

    Args:
        db: Database session (injected)
        local_domain: Reserved service domain (injected)

    Returns:
        RecipientService bound to the request's session
    """
    return RecipientService(db, local_domain)
