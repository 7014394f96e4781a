"""
Tenant Management Use Cases

Gyms, franchises, invitations and staff.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .complete_onboarding_use_case import CompleteOnboardingUseCase
from .create_gym_use_case import CreateGymUseCase
from .dtos import (
    AcceptInvitationResponse,
    CompleteOnboardingCommand,
    CreateGymResponse,
    FranchiseDetails,
    GymChoicesResponse,
    GymDetails,
    InvitationCard,
    InvitationResponse,
    InviteManagerCommand,
    InviteOptionsResponse,
    OnboardingResponse,
    OwnerDetails,
    PendingInvitation,
    StaffListResponse,
    StaffMember,
    SwitchGymResponse,
)
from .invite_manager_use_case import InviteManagerUseCase
from .list_gym_choices_use_case import ListGymChoicesUseCase
from .list_invite_options_use_case import ListInviteOptionsUseCase
from .list_staff_use_case import STATUS_FILTERS, ListStaffUseCase
from .switch_gym_use_case import SwitchGymUseCase

__all__ = [
    "InviteManagerUseCase",
    "ListInviteOptionsUseCase",
    "ListGymChoicesUseCase",
    "AcceptInvitationUseCase",
    "CreateGymUseCase",
    "CompleteOnboardingUseCase",
    "SwitchGymUseCase",
    "ListStaffUseCase",
    "STATUS_FILTERS",
    "InviteManagerCommand",
    "CompleteOnboardingCommand",
    "GymDetails",
    "FranchiseDetails",
    "OwnerDetails",
    "InvitationResponse",
    "InviteOptionsResponse",
    "InvitationCard",
    "GymChoicesResponse",
    "AcceptInvitationResponse",
    "CreateGymResponse",
    "OnboardingResponse",
    "SwitchGymResponse",
    "StaffMember",
    "PendingInvitation",
    "StaffListResponse",
]
