"""
DTOs shared by several use case domains.
"""

from typing import Optional

from pydantic import BaseModel


class AccountInfo(BaseModel):
    """Gym business summary"""

    id: str
    name: str


class SubaccountInfo(BaseModel):
    """Franchise summary"""

    id: str
    name: str
    location: Optional[str] = None


class GymInfo(BaseModel):
    """A gym the user belongs to, as seen through one UserAccount row"""

    account: AccountInfo
    subaccount: Optional[SubaccountInfo] = None
    role: Optional[str] = None
    is_owner: bool
    onboarding_completed: bool
