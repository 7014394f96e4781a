from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from gymhub.app.use_cases.shared_dtos import GymInfo


class IdentityInfo(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    created_at: datetime
    last_sign_in_at: Optional[datetime] = None


class ProfileInfo(BaseModel):
    id: str
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None
    subaccount_id: Optional[str] = None
    is_active: bool


class ContextResponse(BaseModel):
    """
    Response for load context use case

    profile is None until the user has joined or created a gym. current is
    the gym the access token is scoped to.
    """

    identity: IdentityInfo
    profile: Optional[ProfileInfo] = None
    current: Optional[GymInfo] = None
    gyms: List[GymInfo] = []
