from datetime import datetime, timedelta

import pytest

from gymhub.app.use_cases.auth import SignOutUseCase
from gymhub.domain.entities import Session


@pytest.mark.asyncio
async def test_sign_out_revokes_session(mock_uow, context):
    session = Session(
        id=context.session_id,
        identity_id=context.user_id,
        expires_at=datetime.utcnow() + timedelta(days=30),
    )
    mock_uow.sessions.get_by_id.return_value = session

    result = await SignOutUseCase(mock_uow).execute(context)

    assert result.is_ok()
    assert result.value.status == "signed_out"
    assert session.revoked is True
    assert session.revoked_at is not None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_sign_out_unknown_session(mock_uow, context):
    result = await SignOutUseCase(mock_uow).execute(context)

    assert result.is_err()
    assert result.error.code == "SESSION_NOT_FOUND"
