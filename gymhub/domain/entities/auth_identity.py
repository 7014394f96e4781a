"""
AuthIdentity Entity

Credentials held by the identity provider side of the service.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class AuthIdentity(SQLModel, table=True):
    """
    AuthIdentity entity - a sign-in identity.

    Business Rules:
    - Email is unique and stored lower-cased
    - Password stored as bcrypt hash (cost factor 12)
    - The users row of the same person reuses this id
    """

    __tablename__ = "auth_identities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Display name captured at sign-up
    name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_sign_in_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    def display_name(self) -> str:
        return self.name or self.email.split("@")[0]
