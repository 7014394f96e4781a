"""
Invitation Entity

Offer of a role at a franchise to an email address.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending invitations to join a franchise.

    Business Rules:
    - Created by an owner of the franchise's account
    - Token is unique and alone grants access to the invitation link
    - At most one pending invitation per (email, subaccount)
    - Status moves pending -> accepted, never back
    """

    __tablename__ = "user_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    subaccount_id: UUID = Field(
        foreign_key="subaccounts.id", nullable=False, index=True
    )
    email: str = Field(max_length=255, nullable=False, index=True)

    role_id: UUID = Field(foreign_key="roles.id", nullable=False)
    status_id: UUID = Field(foreign_key="status.id", nullable=False)

    token: str = Field(unique=True, index=True, max_length=64)

    invited_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    message: Optional[str] = None

    # Timestamps
    invited_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    responded_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_subaccount_email", "subaccount_id", "email"),
        Index("idx_invitation_status", "status_id"),
    )
