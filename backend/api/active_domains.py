from fastapi import APIRouter, Depends, Response

from constants import HTTPStatus
from dependencies import get_current_user, get_domain_service
from models import User
from schemas import ActiveDomainRequest, Domain, DomainEnvelope
from services.domain_service import DomainService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/active-domains", response_model=DomainEnvelope)
@handle_api_errors("Activate domain")
def activate_domain(
    payload: ActiveDomainRequest,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    """Mark a domain as active"""
    domain = service.activate_domain(user_id=user.id, domain_id=payload.id)
    return DomainEnvelope(data=Domain.model_validate(domain, from_attributes=True))


@router.delete("/active-domains/{domain_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Deactivate domain")
def deactivate_domain(
    domain_id: str,
    user: User = Depends(get_current_user),
    service: DomainService = Depends(get_domain_service),
):
    """Mark a domain as inactive. The domain itself is kept."""
    service.deactivate_domain(user_id=user.id, domain_id=domain_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
