"""Pydantic models for API request bodies."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Operator login payload."""

    email: str = ""
    password: str = ""
