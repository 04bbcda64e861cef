"""
Contact form endpoint.

Stores the submission as a lead and notifies the support mailbox. A failed
notification is logged and does not fail the request.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fivimedia_llc.core.database.entities.leads import ContactSubmission
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.domain import LeadStatus
from fivimedia_llc.core.models.io.common import SuccessResponse
from fivimedia_llc.core.models.io.leads import ContactRequest
from fivimedia_llc.server.services.notifications import EmailNotifier, get_email_notifier

logger = get_logger(__name__)

router = APIRouter(tags=["contact"])


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Submit Contact Form",
    description="Save a contact form message as a lead and email the support team.",
    responses={
        200: {"description": "Message received"},
        400: {"description": "Invalid input"},
    },
)
async def submit_contact(
    request: ContactRequest,
    repos: SqlRepoBundle = Depends(get_repos),
    notifier: EmailNotifier = Depends(get_email_notifier),
) -> SuccessResponse:
    """
    Submit the contact form.

    - **name**: 1 to 100 characters.
    - **email**: Reply address.
    - **message**: 1 to 5000 characters.
    """
    lead = await repos.leads.create(
        ContactSubmission(
            name=request.name,
            email=request.email,
            message=request.message,
            status=LeadStatus.new.value,
        )
    )
    logger.info(f"Lead {lead.id} received from {lead.email}")
    await notifier.send_contact_notification(lead)
    return SuccessResponse()
