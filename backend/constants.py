"""
Application-wide constants.

This module centralizes the magic strings and numbers used by validation,
the API layer and the service layer.
"""


class DomainRules:
    """Limits and patterns for custom domain names"""

    MAX_LENGTH = 253
    MAX_LABEL_LENGTH = 63
    MIN_TLD_LENGTH = 2

    # One label: letters, digits, hyphens; no leading/trailing hyphen
    LABEL_PATTERN = rf'^(?!-)[a-z0-9-]{{1,{MAX_LABEL_LENGTH}}}(?<!-)$'
    TLD_PATTERN = rf'^[a-z]{{{MIN_TLD_LENGTH},{MAX_LABEL_LENGTH}}}$'
    # Anything that looks like "scheme://"
    SCHEME_PATTERN = r'^[a-z][a-z0-9+.-]*://'


class RecipientRules:
    """Limits and patterns for recipient email addresses"""

    MAX_LENGTH = 254
    MAX_LOCAL_PART_LENGTH = 64

    # Dot-atom local part; the host part is checked as a domain name
    LOCAL_PART_PATTERN = rf"^(?!\.)(?!.*\.\.)[a-z0-9!#$%&'*+/=?^_`{{|}}~.-]{{1,{MAX_LOCAL_PART_LENGTH}}}(?<!\.)$"


class ValidationMessages:
    """User-facing validation messages, keyed by rule"""

    DOMAIN_REQUIRED = "The domain field is required."
    DOMAIN_TOO_LONG = f"The domain may not be greater than {DomainRules.MAX_LENGTH} characters."
    DOMAIN_HAS_PROTOCOL = "The domain must not include a protocol such as https://."
    DOMAIN_INVALID = "The domain must be a valid fully qualified domain name."
    DOMAIN_LOCAL = "The domain cannot be the service domain or one of its subdomains."
    DOMAIN_TAKEN = "The domain has already been added."

    EMAIL_REQUIRED = "The email field is required."
    EMAIL_INVALID = "The email must be a valid email address."
    EMAIL_TOO_LONG = f"The email may not be greater than {RecipientRules.MAX_LENGTH} characters."
    EMAIL_LOCAL = "The email cannot use the service domain."
    EMAIL_TAKEN = "The email has already been added."

    GIVEN_DATA_INVALID = "The given data was invalid."


class APIConfig:
    """API surface constants"""

    PREFIX = "/api/v1"
    TITLE = "Mail Relay Domains API"
    VERSION = "1.0.0"


class LoggingConfig:
    """Log file rotation settings"""

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    FILE_NAME = "backend.log"
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
