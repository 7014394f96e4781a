"""
Tenant Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the gym / franchise / invitation domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from gymhub.app.use_cases.shared_dtos import AccountInfo, GymInfo, SubaccountInfo
from gymhub.domain.entities import RoleName


# ============================================================================
# Command DTOs
# ============================================================================


class InviteManagerCommand(BaseModel):
    """Owner's request to invite someone to one of their franchises"""

    email: str
    subaccount_id: UUID
    role: str = RoleName.MANAGER.value
    message: Optional[str] = None


class GymDetails(BaseModel):
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None


class FranchiseDetails(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None


class OwnerDetails(BaseModel):
    name: str
    phone: Optional[str] = None


class CompleteOnboardingCommand(BaseModel):
    """Everything collected by the onboarding wizard"""

    gym: GymDetails
    franchise: FranchiseDetails = Field(default_factory=FranchiseDetails)
    owner: OwnerDetails
    currency: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationResponse(BaseModel):
    """Response for invite manager use case"""

    id: str
    email: str
    role: str
    subaccount: SubaccountInfo
    token: str
    invite_link: str
    invited_at: datetime
    expires_at: datetime
    message: Optional[str] = None


class InviteOptionsResponse(BaseModel):
    """Franchises the caller owns and the roles they may grant"""

    subaccounts: List[SubaccountInfo]
    roles: List[str]


class InvitationCard(BaseModel):
    """One pending invitation as shown on the select-gym screen"""

    id: str
    account: AccountInfo
    subaccount: SubaccountInfo
    role: Optional[str] = None
    message: Optional[str] = None
    invited_at: datetime
    expires_at: datetime


class GymChoicesResponse(BaseModel):
    """
    Response for list gym choices use case

    redirect_to is set when there is nothing to choose from.
    """

    redirect_to: Optional[str] = None
    invitations: List[InvitationCard] = []


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    redirect_to: str
    access_token: str
    gym: GymInfo


class CreateGymResponse(BaseModel):
    """Response for create gym use case"""

    redirect_to: str
    access_token: str
    account: AccountInfo


class OnboardingResponse(BaseModel):
    """Response for complete onboarding use case"""

    redirect_to: str
    access_token: str
    gym: GymInfo


class SwitchGymResponse(BaseModel):
    """Response for switch gym use case"""

    access_token: str
    gym: GymInfo


class StaffMember(BaseModel):
    user_id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None
    subaccount: SubaccountInfo
    is_active: bool
    is_owner: bool
    created_at: datetime


class PendingInvitation(BaseModel):
    id: str
    email: str
    role: Optional[str] = None
    subaccount: SubaccountInfo
    invited_at: datetime
    expires_at: datetime


class StaffListResponse(BaseModel):
    """Response for list staff use case"""

    staff: List[StaffMember]
    pending_invitations: List[PendingInvitation]
