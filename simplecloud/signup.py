"""Validation of the sign-up form before it is sent to the server."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["SignupError", "SignupRequest", "validate_signup"]


class SignupError(ValueError):
    """Raised when the sign-up form is incomplete or inconsistent."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


@dataclass(frozen=True)
class SignupRequest:
    """A checked sign-up request."""

    username: str
    email: str
    password: str = field(repr=False)


def validate_signup(username: str, email: str, password: str, confirmation: str) -> SignupRequest:
    """Check the form fields and return the request to send."""
    if not username or not password or not email:
        raise SignupError("missing data", "username or password not provided")
    if confirmation != password:
        raise SignupError("wrong password", "passwords dont match")
    return SignupRequest(username, email, password)