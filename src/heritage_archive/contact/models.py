"""
Contact inquiry model and validation rules.
"""

import re

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_MESSAGE_LENGTH = 10
MAX_MESSAGE_LENGTH = 5000

SPAM_PHRASES: tuple[str, ...] = (
    "viagra",
    "casino",
    "lottery",
    "winner",
    "congratulations",
    "click here",
    "free money",
)


def contains_spam(text: str) -> bool:
    """Return True if ``text`` contains a blocked phrase (case-insensitive)."""
    lowered = text.lower()
    return any(phrase in lowered for phrase in SPAM_PHRASES)


class ContactInquiry(BaseModel):
    """A message sent through the public contact form."""

    name: str = Field(..., min_length=1, max_length=200, description="Sender name")
    email: str = Field(..., min_length=1, max_length=320, description="Sender email")
    subject: str = Field(..., min_length=1, max_length=300, description="Message subject")
    message: str = Field(..., description="Message body")

    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Ensure the sender address looks like an email address."""
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Enforce length bounds and the spam phrase filter."""
        if len(v) < MIN_MESSAGE_LENGTH:
            raise ValueError(f"Message must be at least {MIN_MESSAGE_LENGTH} characters long")
        if len(v) > MAX_MESSAGE_LENGTH:
            raise ValueError(f"Message must be less than {MAX_MESSAGE_LENGTH} characters")
        if contains_spam(v):
            raise ValueError("Message contains prohibited content")
        return v
