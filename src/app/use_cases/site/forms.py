from pydantic import BaseModel, EmailStr, Field


class ContactForm(BaseModel):
    """Message sent to the site administrator"""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
