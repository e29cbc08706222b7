from pydantic import BaseModel, EmailStr, Field


class ContactMessage(BaseModel):
    """Message submitted through the site's contact form."""

    name: str = Field(..., min_length=1, description="Sender name")
    email: EmailStr = Field(..., description="Sender email address")
    subject: str = Field(..., min_length=1, description="Message subject")
    message: str = Field(..., min_length=1, description="Message body")
