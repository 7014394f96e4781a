"""
Account Entity

Top-level tenant: a gym business.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Account(SQLModel, table=True):
    """
    Account entity - a gym business owning one or more franchises.

    Business Rules:
    - Created as a placeholder at sign-up with onboarding_completed=False
    - The onboarding wizard fills in contact details and completes it
    - Owned through a user_accounts row with is_owner=True
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    # Contact info
    email: Optional[str] = Field(default=None, max_length=255, index=True)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    website: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None

    currency: str = Field(default="USD", max_length=3)
    onboarding_completed: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_account_onboarding", "onboarding_completed"),)
