"""
Validation Services

Validation logic for user-supplied domain names and recipient addresses,
kept apart from the business operations that use them.
"""
import re
import logging
from typing import List

from sqlalchemy.orm import Session

from constants import RecipientRules, ValidationMessages
from domain.value_objects import DomainName
from exceptions import ValidationError
from repositories.domain_repository import DomainRepository
from repositories.recipient_repository import RecipientRepository

logger = logging.getLogger(__name__)

_LOCAL_PART_RE = re.compile(RecipientRules.LOCAL_PART_PATTERN)


class DomainValidator:
    """Validator for new custom domains"""

    def __init__(self, db: Session, local_domain: str):
        """
        Args:
            db: Database session (used for the per-user uniqueness check)
            local_domain: The service's own reserved domain
        """
        self.domain_repo = DomainRepository(db)
        self.local_domain = local_domain

    def collect_errors(self, user_id: str, raw: str | None) -> List[str]:
        """
        Run every domain rule and gather the failure messages.

        Args:
            user_id: Caller's user ID
            raw: Domain name as submitted

        Returns:
            List of messages, empty when the name is acceptable
        """
        if raw is None or not raw.strip():
            return [ValidationMessages.DOMAIN_REQUIRED]

        name = DomainName(raw)
        errors: List[str] = []

        # One message per cause: length and scheme failures also fail the FQDN rule
        if name.is_too_long():
            errors.append(ValidationMessages.DOMAIN_TOO_LONG)
        elif name.has_scheme():
            errors.append(ValidationMessages.DOMAIN_HAS_PROTOCOL)
        elif not name.is_fqdn():
            errors.append(ValidationMessages.DOMAIN_INVALID)

        if name.is_within(self.local_domain):
            errors.append(ValidationMessages.DOMAIN_LOCAL)

        if self.domain_repo.name_taken_by_user(user_id, name.value):
            errors.append(ValidationMessages.DOMAIN_TAKEN)

        return errors

    def validate_new_domain(self, user_id: str, raw: str | None) -> DomainName:
        """
        Validate a domain the user wants to add.

        Args:
            user_id: Caller's user ID
            raw: Domain name as submitted

        Returns:
            The normalized DomainName

        Raises:
            ValidationError: If any rule fails, with messages under "domain"
        """
        errors = self.collect_errors(user_id, raw)
        if errors:
            logger.debug(f"Rejected domain {raw!r} for user {user_id}: {errors}")
            raise ValidationError(
                ValidationMessages.GIVEN_DATA_INVALID,
                invalid_fields={'domain': errors}
            )
        return DomainName(raw)


class RecipientValidator:
    """Validator for new recipient addresses"""

    def __init__(self, db: Session, local_domain: str):
        self.recipient_repo = RecipientRepository(db)
        self.local_domain = local_domain

    def validate_new_email(self, user_id: str, raw: str | None) -> str:
        """
        Validate a recipient address the user wants to add.

        Args:
            user_id: Caller's user ID
            raw: Email address as submitted

        Returns:
            The lower-cased address

        Raises:
            ValidationError: If any rule fails, with messages under "email"
        """
        if raw is None or not raw.strip():
            raise ValidationError(
                ValidationMessages.GIVEN_DATA_INVALID,
                invalid_fields={'email': [ValidationMessages.EMAIL_REQUIRED]}
            )

        email = raw.strip().lower()
        errors: List[str] = []

        if len(email) > RecipientRules.MAX_LENGTH:
            errors.append(ValidationMessages.EMAIL_TOO_LONG)

        local_part, _, host = email.rpartition('@')
        if not _LOCAL_PART_RE.match(local_part) or not DomainName(host).is_fqdn():
            errors.append(ValidationMessages.EMAIL_INVALID)
        elif DomainName(host).is_within(self.local_domain):
            errors.append(ValidationMessages.EMAIL_LOCAL)

        if self.recipient_repo.email_taken_by_user(user_id, email):
            errors.append(ValidationMessages.EMAIL_TAKEN)

        if errors:
            raise ValidationError(
                ValidationMessages.GIVEN_DATA_INVALID,
                invalid_fields={'email': errors}
            )
        return email
