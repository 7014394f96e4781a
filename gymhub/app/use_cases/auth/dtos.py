"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (validated business intent)
- *Response: Output from use case (structured result)
"""

from typing import Optional

from pydantic import BaseModel

from gymhub.app.use_cases.shared_dtos import GymInfo


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    name: str


class AuthResponse(BaseModel):
    """
    Response for signup and login use cases

    redirect_to tells the client which screen comes next:
    /select-gym, /onboarding or /dashboard.
    """

    access_token: str
    session_id: str
    user_id: str
    email: str
    redirect_to: str
    gym: Optional[GymInfo] = None
    pending_invitations: int = 0


class SignOutResponse(BaseModel):
    """Response for sign-out use case"""

    status: str
