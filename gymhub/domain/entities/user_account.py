"""
UserAccount Entity

Links a User to an Account (and optionally a Subaccount) with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class UserAccount(SQLModel, table=True):
    """
    UserAccount entity - tenant membership.

    Business Rules:
    - One user can be linked to many accounts
    - is_owner=True grants administrative rights over the whole account
    - subaccount_id is empty for an owner until onboarding creates the
      first franchise
    """

    __tablename__ = "user_accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)
    subaccount_id: Optional[UUID] = Field(
        default=None, foreign_key="subaccounts.id", index=True
    )

    role_id: Optional[UUID] = Field(default=None, foreign_key="roles.id")
    is_owner: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_user_account_user_account", "user_id", "account_id"),
        Index("idx_user_account_owner", "is_owner"),
    )
