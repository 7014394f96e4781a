"""
User Use Cases

All user-related business logic.
"""

from .dtos import ContextResponse, IdentityInfo, ProfileInfo
from .load_context_use_case import LoadContextUseCase

__all__ = [
    "LoadContextUseCase",
    "ContextResponse",
    "IdentityInfo",
    "ProfileInfo",
]
