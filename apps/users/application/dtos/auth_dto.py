"""
Authentication DTOs.
"""
from dataclasses import dataclass

from ...domain.entities.customer_profile import CustomerProfile


@dataclass
class LoginDTO:
    """DTO for login request."""
    username: str
    password: str


@dataclass
class AuthenticatedDTO:
    """DTO for a signed-in customer."""
    token: str
    profile: CustomerProfile
