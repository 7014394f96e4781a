"""
Tenant Context

The caller's identity and active gym, decoded once per request from the
access token and handed to use cases explicitly.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class TenantContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: UUID
    email: str
    session_id: UUID
    account_id: Optional[UUID] = None
    subaccount_id: Optional[UUID] = None
    role: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "TenantContext":
        """Build a context from decoded JWT claims (raises on malformed claims)"""
        return cls(
            user_id=claims["user_id"],
            email=claims["email"],
            session_id=claims["session_id"],
            account_id=claims.get("account_id"),
            subaccount_id=claims.get("subaccount_id"),
            role=claims.get("role"),
        )

    def to_claims(self) -> Dict[str, Any]:
        return {
            "user_id": str(self.user_id),
            "email": self.email,
            "session_id": str(self.session_id),
            "account_id": str(self.account_id) if self.account_id else None,
            "subaccount_id": str(self.subaccount_id) if self.subaccount_id else None,
            "role": self.role,
        }

    def scoped_to(
        self,
        account_id: Optional[UUID],
        subaccount_id: Optional[UUID],
        role: Optional[str],
    ) -> "TenantContext":
        """Same identity and session, different active gym"""
        return self.model_copy(
            update={
                "account_id": account_id,
                "subaccount_id": subaccount_id,
                "role": role,
            }
        )
