"""
Domain Service

Business logic for custom domains: creation with validation, partial updates,
activation toggling and default-recipient assignment.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from constants import ValidationMessages
from exceptions import NotFoundError, ValidationError
from models import Domain
from repositories.domain_repository import DomainRepository
from repositories.recipient_repository import RecipientRepository
from services.base_service import BaseService
from services.validators import DomainValidator
from utils.logging_utils import log_operation

# Fields a PATCH on /domains/{id} may change
UPDATABLE_FIELDS = ("description",)


class DomainService(BaseService):
    """Service for domain-related business logic."""

    def __init__(self, db: Session, local_domain: str):
        """
        Initialize DomainService.

        Args:
            db: Database session
            local_domain: The service's own reserved domain
        """
        super().__init__(db)
        self.domain_repo = DomainRepository(db)
        self.recipient_repo = RecipientRepository(db)
        self.validator = DomainValidator(db, local_domain)

    def list_domains(self, *, user_id: str) -> List[Domain]:
        """All of the user's domains, newest first."""
        return self.domain_repo.list_for_user(user_id)

    def get_domain(self, *, user_id: str, domain_id: str) -> Domain:
        """
        Fetch one of the user's domains.

        Raises:
            NotFoundError: If the domain does not exist or belongs to someone else
        """
        domain = self.domain_repo.get_for_user(user_id, domain_id)
        if not domain:
            raise NotFoundError("Domain", domain_id)
        return domain

    @log_operation("create_domain")
    def create_domain(self, *, user_id: str, domain: str, description: Optional[str] = None) -> Domain:
        """
        Validate and store a new domain.

        The domain starts active and unverified.

        Raises:
            ValidationError: If the name breaks any domain rule
        """
        name = self.validator.validate_new_domain(user_id, domain)

        try:
            record = self.domain_repo.create(Domain(
                user_id=user_id,
                domain=name.value,
                description=description,
                active=True,
            ))
            self._commit("create_domain")
        except IntegrityError:
            # Lost a race against a concurrent insert of the same name
            self.db.rollback()
            raise ValidationError(
                ValidationMessages.GIVEN_DATA_INVALID,
                invalid_fields={'domain': [ValidationMessages.DOMAIN_TAKEN]}
            )

        self.db.refresh(record)
        return record

    @log_operation("update_domain")
    def update_domain(self, *, user_id: str, domain_id: str, changes: Dict[str, Any]) -> Domain:
        """
        Apply a partial update.

        Args:
            user_id: Caller's user ID
            domain_id: Domain UUID
            changes: Field values that were explicitly sent; unknown keys are ignored
        """
        domain = self.get_domain(user_id=user_id, domain_id=domain_id)

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(domain, field, changes[field])

        self.domain_repo.update(domain)
        self._commit("update_domain")
        self.db.refresh(domain)
        return domain

    @log_operation("delete_domain")
    def delete_domain(self, *, user_id: str, domain_id: str) -> None:
        domain = self.get_domain(user_id=user_id, domain_id=domain_id)
        self.domain_repo.delete(domain)
        self._commit("delete_domain")

    @log_operation("activate_domain")
    def activate_domain(self, *, user_id: str, domain_id: str) -> Domain:
        domain = self.get_domain(user_id=user_id, domain_id=domain_id)
        self.domain_repo.set_active(domain, True)
        self._commit("activate_domain")
        self.db.refresh(domain)
        return domain

    @log_operation("deactivate_domain")
    def deactivate_domain(self, *, user_id: str, domain_id: str) -> Domain:
        """Clear the active flag. The row itself is kept."""
        domain = self.get_domain(user_id=user_id, domain_id=domain_id)
        self.domain_repo.set_active(domain, False)
        self._commit("deactivate_domain")
        self.db.refresh(domain)
        return domain

    @log_operation("update_default_recipient")
    def set_default_recipient(self, *, user_id: str, domain_id: str, recipient_id: Optional[str]) -> Domain:
        """
        Set or clear the domain's default recipient.

        An empty recipient_id clears the association. Otherwise the recipient
        must belong to the user and be verified; anything else is reported as
        not found so unverified recipients are not disclosed.

        Raises:
            NotFoundError: If the domain, or an eligible recipient, is not found
        """
        domain = self.get_domain(user_id=user_id, domain_id=domain_id)

        if not recipient_id:
            domain.default_recipient_id = None
        else:
            recipient = self.recipient_repo.get_verified_for_user(user_id, recipient_id)
            if not recipient:
                raise NotFoundError("Recipient", recipient_id)
            domain.default_recipient_id = recipient.id

        self.domain_repo.update(domain)
        self._commit("update_default_recipient")
        self.db.refresh(domain)
        return domain
