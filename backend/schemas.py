from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


# Recipient Schemas
class Recipient(BaseModel):
    id: str
    user_id: str
    email: str
    email_verified_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RecipientCreate(BaseModel):
    email: str


class RecipientEnvelope(BaseModel):
    data: Recipient


class RecipientListEnvelope(BaseModel):
    data: List[Recipient]


# Domain Schemas
class Domain(BaseModel):
    id: str
    user_id: str
    domain: str
    description: Optional[str] = None
    active: bool
    domain_verified_at: Optional[datetime] = None
    default_recipient: Optional[Recipient] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DomainCreate(BaseModel):
    # Name rules are enforced by DomainValidator so every failure is reported under "domain"
    domain: str
    description: Optional[str] = Field(None, max_length=200)


class DomainUpdate(BaseModel):
    """Partial update; only fields present in the body are applied"""
    description: Optional[str] = Field(None, max_length=200)


class DomainDefaultRecipientUpdate(BaseModel):
    """An empty string or null clears the default recipient"""
    default_recipient: Optional[str] = None


class ActiveDomainRequest(BaseModel):
    id: str


class DomainEnvelope(BaseModel):
    data: Domain


class DomainListEnvelope(BaseModel):
    data: List[Domain]


# Health Schemas
class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
