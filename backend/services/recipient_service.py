"""
Recipient Service

Business logic for the addresses a user forwards mail to.
"""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from constants import ValidationMessages
from exceptions import NotFoundError, ValidationError
from models import Recipient
from repositories.recipient_repository import RecipientRepository
from services.base_service import BaseService
from services.validators import RecipientValidator
from utils.logging_utils import log_operation


class RecipientService(BaseService):
    """Service for recipient-related business logic."""

    def __init__(self, db: Session, local_domain: str):
        super().__init__(db)
        self.recipient_repo = RecipientRepository(db)
        self.validator = RecipientValidator(db, local_domain)

    def list_recipients(self, *, user_id: str) -> List[Recipient]:
        return self.recipient_repo.list_for_user(user_id)

    def get_recipient(self, *, user_id: str, recipient_id: str) -> Recipient:
        recipient = self.recipient_repo.get_for_user(user_id, recipient_id)
        if not recipient:
            raise NotFoundError("Recipient", recipient_id)
        return recipient

    @log_operation("create_recipient")
    def create_recipient(self, *, user_id: str, email: str) -> Recipient:
        """
        Validate and store a new, unverified recipient.

        Raises:
            ValidationError: If the address is malformed, local or already added
        """
        address = self.validator.validate_new_email(user_id, email)

        try:
            recipient = self.recipient_repo.create(Recipient(user_id=user_id, email=address))
            self._commit("create_recipient")
        except IntegrityError:
            self.db.rollback()
            raise ValidationError(
                ValidationMessages.GIVEN_DATA_INVALID,
                invalid_fields={'email': [ValidationMessages.EMAIL_TAKEN]}
            )

        self.db.refresh(recipient)
        return recipient

    @log_operation("delete_recipient")
    def delete_recipient(self, *, user_id: str, recipient_id: str) -> None:
        """
        Delete a recipient.

        Domains using it as their default recipient fall back to none.
        """
        recipient = self.get_recipient(user_id=user_id, recipient_id=recipient_id)

        for domain in list(recipient.default_for_domains):
            domain.default_recipient = None

        self.recipient_repo.delete(recipient)
        self._commit("delete_recipient")
