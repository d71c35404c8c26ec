from fastapi import APIRouter, Depends, Response

from constants import HTTPStatus
from dependencies import get_current_user, get_domain_service
from models import User
from schemas import (
    Domain,
    DomainCreate,
    DomainDefaultRecipientUpdate,
    DomainEnvelope,
    DomainListEnvelope,
    DomainUpdate,
)
from services.domain_service import DomainService
from utils.error_handlers import handle_api_errors

router = APIRouter()


def _envelope(domain) -> DomainEnvelope:
    return DomainEnvelope(data=Domain.model_validate(domain, from_attributes=True))


@router.get("/domains", response_model=DomainListEnvelope)
@handle_api_errors("List domains")
def list_domains(
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    """All domains owned by the caller, newest first"""
    domains = service.list_domains(user_id=user.id)
    return DomainListEnvelope(data=[Domain.model_validate(d, from_attributes=True) for d in domains])


@router.get("/domains/{domain_id}", response_model=DomainEnvelope)
@handle_api_errors("Get domain")
def get_domain(
    domain_id: str,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    return _envelope(service.get_domain(user_id=user.id, domain_id=domain_id))


@router.post("/domains", response_model=DomainEnvelope, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create domain")
def create_domain(
    payload: DomainCreate,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    """Add a custom domain. It starts active and unverified."""
    domain = service.create_domain(
        user_id=user.id,
        domain=payload.domain,
        description=payload.description,
    )
    return _envelope(domain)


@router.patch("/domains/{domain_id}", response_model=DomainEnvelope)
@handle_api_errors("Update domain")
def update_domain(
    domain_id: str,
    payload: DomainUpdate,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    """Partial update; fields missing from the body are left untouched"""
    domain = service.update_domain(
        user_id=user.id,
        domain_id=domain_id,
        changes=payload.model_dump(exclude_unset=True),
    )
    return _envelope(domain)


@router.patch("/domains/{domain_id}/default-recipient", response_model=DomainEnvelope)
@handle_api_errors("Update domain default recipient")
def update_default_recipient(
    domain_id: str,
    payload: DomainDefaultRecipientUpdate,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    """
    Set the domain's default recipient, or clear it with an empty value.

    Unverified or unknown recipients answer 404.
    """
    domain = service.set_default_recipient(
        user_id=user.id,
        domain_id=domain_id,
        recipient_id=payload.default_recipient,
    )
    return _envelope(domain)


@router.delete("/domains/{domain_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete domain")
def delete_domain(
    domain_id: str,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    service.delete_domain(user_id=user.id, domain_id=domain_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
