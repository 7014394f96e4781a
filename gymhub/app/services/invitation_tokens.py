"""
Invitation tokens and deep links.

A token is two 13-character base-36 fragments, e.g.
``k3f9x0q2m1z7a5b8c4d6e2f1g9``. It is opaque and unsigned: possession of the
token is what grants access to the invitation link.
"""

import secrets
import string
from datetime import datetime, timedelta
from urllib.parse import urlencode

from config import ApplicationConfig

BASE36_ALPHABET = string.digits + string.ascii_lowercase
FRAGMENT_LENGTH = 13


def _fragment() -> str:
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(FRAGMENT_LENGTH))


def generate_invitation_token() -> str:
    return _fragment() + _fragment()


def build_invite_link(token: str) -> str:
    """Deep link to the select-gym screen for this token"""
    base_url = ApplicationConfig.APP_BASE_URL.rstrip("/")
    return f"{base_url}/select-gym?{urlencode({'token': token})}"


def display_expiry(invited_at: datetime) -> datetime:
    """Expiry shown next to an invitation; acceptance never checks it"""
    return invited_at + timedelta(days=ApplicationConfig.INVITATION_DISPLAY_DAYS)
