from fastapi import APIRouter
from pydantic import BaseModel, Field

from portfolio.core.modules.contact.models import ContactMessage
from portfolio.web.deps import AppDep
from portfolio.web.openapi import ErrorResponse

router = APIRouter(tags=["contact"])


class ContactResponse(BaseModel):
    message: str = Field(..., description="Human-readable status")
    success: bool = Field(..., description="Whether the message was accepted")


@router.post(
    "/contact",
    summary="Send contact message",
    description="Submit the contact form. The message is validated and logged.",
    operation_id="sendContactMessage",
    responses={
        200: {"description": "Message accepted"},
        400: {"model": ErrorResponse, "description": "Invalid form data"},
    },
)
async def send_contact_message(req: ContactMessage, app: AppDep) -> ContactResponse:
    await app.submit_contact_message(req)
    return ContactResponse(message="Message sent successfully", success=True)
