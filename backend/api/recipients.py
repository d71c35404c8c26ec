from fastapi import APIRouter, Depends, Response

from constants import HTTPStatus
from dependencies import get_current_user, get_recipient_service
from models import User
from schemas import Recipient, RecipientCreate, RecipientEnvelope, RecipientListEnvelope
from services.recipient_service import RecipientService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("/recipients", response_model=RecipientListEnvelope)
@handle_api_errors("List recipients")
def list_recipients(
    user: User = Depends(get_current_user),
    service: RecipientService = Depends(get_recipient_service),
):
    recipients = service.list_recipients(user_id=user.id)
    return RecipientListEnvelope(data=[Recipient.model_validate(r, from_attributes=True) for r in recipients])


@router.get("/recipients/{recipient_id}", response_model=RecipientEnvelope)
@handle_api_errors("Get recipient")
def get_recipient(
    recipient_id: str,
    user: User = Depends(get_current_user),
    service: RecipientService = Depends(get_recipient_service),
):
    recipient = service.get_recipient(user_id=user.id, recipient_id=recipient_id)
    return RecipientEnvelope(data=Recipient.model_validate(recipient, from_attributes=True))


@router.post("/recipients", response_model=RecipientEnvelope, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create recipient")
def create_recipient(
    payload: RecipientCreate,
    user: User = Depends(get_current_user),
    service: RecipientService = Depends(get_recipient_service),
):
    """Add a recipient. New recipients are unverified."""
    recipient = service.create_recipient(user_id=user.id, email=payload.email)
    return RecipientEnvelope(data=Recipient.model_validate(recipient, from_attributes=True))


@router.delete("/recipients/{recipient_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete recipient")
def delete_recipient(
    recipient_id: str,
    user: User = Depends(get_current_user),
    service: RecipientService = Depends(get_recipient_service),
):
    """Delete a recipient; domains using it as default recipient are cleared"""
    service.delete_recipient(user_id=user.id, recipient_id=recipient_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
