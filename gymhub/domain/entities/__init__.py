"""
GymHub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import ASSIGNABLE_ROLES, RoleName, StatusName

# Export all entities
from .auth_identity import AuthIdentity
from .session import Session
from .account import Account
from .subaccount import Subaccount
from .role import Role
from .status import Status
from .user import User
from .user_account import UserAccount
from .invitation import Invitation

__all__ = [
    # Enums
    "ASSIGNABLE_ROLES",
    "RoleName",
    "StatusName",
    # Entities
    "AuthIdentity",
    "Session",
    "Account",
    "Subaccount",
    "Role",
    "Status",
    "User",
    "UserAccount",
    "Invitation",
]
