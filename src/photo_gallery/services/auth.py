"""Operator login check."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoginService:
    """Compares credentials against the single configured operator."""

    email: str
    password: str

    def authenticate(self, email: str, password: str) -> bool:
        """Return whether the credentials match exactly."""
        if not email or not password:
            return False
        return email == self.email and password == self.password
