from sqlalchemy import Column, String, Boolean, Text, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from database import Base


def generate_uuid():
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = 'users'

    id = Column(String, primary_key=True, default=generate_uuid)
    username = Column(String, nullable=False, unique=True)
    api_token_hash = Column(String(64), nullable=False, unique=True)  # sha256 hex of the bearer token
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    domains = relationship("Domain", back_populates="user", cascade="all, delete-orphan")
    recipients = relationship("Recipient", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("username != ''"),
    )


class Recipient(Base):
    """
    An address mail can be forwarded to.

    Only verified recipients (email_verified_at set) may become a domain's
    default recipient.
    """
    __tablename__ = 'recipients'

    id = Column(String, primary_key=True, default=generate_uuid)
    user_id = Column(String, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    email = Column(String, nullable=False)
    email_verified_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="recipients")
    default_for_domains = relationship("Domain", back_populates="default_recipient")

    __table_args__ = (
        UniqueConstraint('user_id', 'email', name='uq_recipients_user_email'),
        Index('idx_recipients_user', 'user_id'),
    )


class Domain(Base):
    """
    A custom domain owned by a user.

    Domain states:
    - active: eligible to receive forwarded mail (toggled via /active-domains)
    - verified: domain_verified_at is set once ownership has been confirmed
    """
    __tablename__ = 'domains'

    id = Column(String, primary_key=True, default=generate_uuid)
    user_id = Column(String, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    domain = Column(String(253), nullable=False)  # Always stored lower-case
    description = Column(Text, nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    domain_verified_at = Column(DateTime, nullable=True)
    default_recipient_id = Column(String, ForeignKey('recipients.id', ondelete='SET NULL'), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="domains")
    default_recipient = relationship("Recipient", back_populates="default_for_domains")

    __table_args__ = (
        CheckConstraint("domain != ''"),
        UniqueConstraint('user_id', 'domain', name='uq_domains_user_domain'),
        Index('idx_domains_user', 'user_id'),
    )

    def __repr__(self):
        return f"<Domain {self.domain} active={self.active}>"
