"""Sign-up form model.

Each field is trimmed before its rules run. Password rules are checked
independently and every violated rule is reported, not just the first.
"""

import re
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


NAME_TOO_SHORT = "Name must be at least 2 characters long."
EMAIL_INVALID = "Please enter a valid email."

PASSWORD_RULES: list[tuple[str, Any]] = [
    ("Be at least 8 characters long", lambda p: len(p) >= 8),
    ("Contain at least one letter.", lambda p: re.search(r"[a-zA-Z]", p) is not None),
    ("Contain at least one number.", lambda p: re.search(r"[0-9]", p) is not None),
    ("Contain at least one special character.", lambda p: re.search(r"[^a-zA-Z0-9]", p) is not None),
]


def _trimmed(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Input should be a valid string")
    return value.strip()


class SignupForm(BaseModel):
    """Sign-up credentials submitted from the registration form."""

    name: str = Field(None, validate_default=True)
    email: str = Field(None, validate_default=True)
    password: str = Field(None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        name = _trimmed(value)
        if len(name) < 2:
            raise PydanticCustomError("name_too_short", NAME_TOO_SHORT)
        return name

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value: Any) -> str:
        email = _trimmed(value)
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email_invalid", EMAIL_INVALID)
        return email

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, value: Any) -> str:
        password = _trimmed(value)
        violated = [message for message, rule in PASSWORD_RULES if not rule(password)]
        if violated:
            # ctx["messages"] is expanded into one field error per rule
            raise PydanticCustomError(
                "password_rules",
                "Password does not meet requirements.",
                {"messages": violated},
            )
        return password
