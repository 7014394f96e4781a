"""
GymHub Domain Enums

Names of the rows seeded into the roles and status lookup tables.
"""

from enum import Enum


class RoleName(str, Enum):
    """Role names stored in the roles table"""

    OWNER = "OWNER"
    MANAGER = "MANAGER"
    TRAINER = "TRAINER"
    STAFF = "STAFF"


class StatusName(str, Enum):
    """Status names stored in the status table"""

    pending = "pending"
    accepted = "accepted"


# Roles an owner may grant through an invitation
ASSIGNABLE_ROLES = (RoleName.MANAGER, RoleName.TRAINER)
