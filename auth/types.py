"""Pydantic models for auth domain."""

from pydantic import BaseModel, Field


class AuthenticateResult(BaseModel):
    """
    Outcome of a sign-in attempt.

    error is set only for rejected credentials. redirect_to is set only when
    the provider succeeded and produced a target.
    """

    error: str | None = Field(None, description="Sentinel for rejected credentials")
    redirect_to: str | None = Field(None, description="Where to navigate after sign-in")
