"""
User Entity

Profile of a person working at a gym, linked 1:1 to an AuthIdentity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class User(SQLModel, table=True):
    """
    User entity - staff profile.

    Business Rules:
    - id equals the AuthIdentity id (no default, always supplied)
    - subaccount_id and role_id reflect the most recently joined franchise
    - Tenant memberships live in user_accounts, not here
    """

    __tablename__ = "users"

    id: UUID = Field(primary_key=True)

    subaccount_id: Optional[UUID] = Field(default=None, foreign_key="subaccounts.id")

    name: Optional[str] = Field(default=None, max_length=255)
    email: str = Field(index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)

    role_id: Optional[UUID] = Field(default=None, foreign_key="roles.id")
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_user_subaccount", "subaccount_id"),)
