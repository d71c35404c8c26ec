import pytest

from constants import ValidationMessages
from exceptions import ValidationError
from models import Domain
from services.validators import DomainValidator, RecipientValidator

LOCAL_DOMAIN = "mailrelay.me"


@pytest.fixture
def domain_validator(db_session):
    return DomainValidator(db_session, LOCAL_DOMAIN)


@pytest.fixture
def recipient_validator(db_session):
    return RecipientValidator(db_session, LOCAL_DOMAIN)


def test_valid_domain_is_returned_normalized(domain_validator, user):
    name = domain_validator.validate_new_domain(user.id, "Example.com")

    assert name.value == "example.com"


@pytest.mark.parametrize("raw,message", [
    ("", ValidationMessages.DOMAIN_REQUIRED),
    (None, ValidationMessages.DOMAIN_REQUIRED),
    ("example.", ValidationMessages.DOMAIN_INVALID),
    ("https://example.com", ValidationMessages.DOMAIN_HAS_PROTOCOL),
    (LOCAL_DOMAIN, ValidationMessages.DOMAIN_LOCAL),
    ("subdomain" + LOCAL_DOMAIN, ValidationMessages.DOMAIN_LOCAL),
])
def test_domain_rule_messages(domain_validator, user, raw, message):
    with pytest.raises(ValidationError) as exc_info:
        domain_validator.validate_new_domain(user.id, raw)

    assert message in exc_info.value.invalid_fields["domain"]


def test_protocol_does_not_also_report_fqdn(domain_validator, user):
    errors = domain_validator.collect_errors(user.id, "https://example.com")

    assert errors == [ValidationMessages.DOMAIN_HAS_PROTOCOL]


def test_overlong_domain_gets_only_the_length_message(domain_validator, user):
    errors = domain_validator.collect_errors(user.id, "a" * 300 + ".com")

    assert errors == [ValidationMessages.DOMAIN_TOO_LONG]


def test_uniqueness_is_per_user(domain_validator, db_session, user, other_user):
    db_session.add(Domain(user_id=other_user.id, domain="example.com"))
    db_session.commit()

    assert domain_validator.collect_errors(user.id, "example.com") == []
    assert domain_validator.collect_errors(other_user.id, "example.com") == [ValidationMessages.DOMAIN_TAKEN]


def test_several_failures_are_collected(domain_validator, db_session, user):
    db_session.add(Domain(user_id=user.id, domain="sub.mailrelay.me"))
    db_session.commit()

    errors = domain_validator.collect_errors(user.id, "sub.mailrelay.me")

    assert ValidationMessages.DOMAIN_LOCAL in errors
    assert ValidationMessages.DOMAIN_TAKEN in errors


def test_valid_email_is_lower_cased(recipient_validator, user):
    assert recipient_validator.validate_new_email(user.id, " Me@Example.NET ") == "me@example.net"


@pytest.mark.parametrize("raw,message", [
    ("", ValidationMessages.EMAIL_REQUIRED),
    ("me@", ValidationMessages.EMAIL_INVALID),
    ("me example@net.com", ValidationMessages.EMAIL_INVALID),
    ("me@-.com", ValidationMessages.EMAIL_INVALID),
    ("me@a..com", ValidationMessages.EMAIL_INVALID),
    ("me@.example.com", ValidationMessages.EMAIL_INVALID),
    ('a"b<>@x_y.com', ValidationMessages.EMAIL_INVALID),
    (".me@example.com", ValidationMessages.EMAIL_INVALID),
    ("me@localhost", ValidationMessages.EMAIL_INVALID),
    ("alias@mailrelay.me", ValidationMessages.EMAIL_LOCAL),
    ("alias@sub.mailrelay.me", ValidationMessages.EMAIL_LOCAL),
])
def test_email_rule_messages(recipient_validator, user, raw, message):
    with pytest.raises(ValidationError) as exc_info:
        recipient_validator.validate_new_email(user.id, raw)

    assert message in exc_info.value.invalid_fields["email"]


@pytest.mark.parametrize("raw", [
    "first.last@example.com",
    "me+tag@sub.example.co.uk",
    "o'brien@example.org",
])
def test_unusual_but_valid_emails_are_accepted(recipient_validator, user, raw):
    assert recipient_validator.validate_new_email(user.id, raw) == raw
