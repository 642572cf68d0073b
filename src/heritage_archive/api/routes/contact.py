"""
Contact form endpoint.

Validation (required fields, email shape, message length and the spam
phrase check) happens in ``ContactInquiry``; failures come back as 400.
"""

import logging

from fastapi import APIRouter, Request

from heritage_archive.api.schemas.exceptions import InternalError
from heritage_archive.api.schemas.responses import ContactResponse
from heritage_archive.contact import ContactInquiry, ContactMailer
from heritage_archive.core.exceptions import ContactDeliveryError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=ContactResponse)
def submit_inquiry(body: ContactInquiry, request: Request) -> ContactResponse:
    """Send an inquiry to the archive inbox."""
    mailer: ContactMailer = request.app.state.mailer
    try:
        message_id = mailer.send(body)
    except ContactDeliveryError as e:
        logger.error(f"Contact inquiry from {body.email} not delivered ({e.reason})")
        raise InternalError(message="Failed to send message. Please try again later.") from e

    return ContactResponse(id=message_id)
