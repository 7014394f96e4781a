from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from gymhub.api.error import ClientError, ServerError
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.tenants import (
    InvitationResponse,
    InviteManagerCommand,
    InviteManagerUseCase,
    InviteOptionsResponse,
    ListInviteOptionsUseCase,
)
from gymhub.depends import get_tenant_context, get_unit_of_work
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import RoleName

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class InviteManagerRequest(BaseModel):
    """
    Invite manager HTTP request payload

    Validates incoming request before converting to InviteManagerCommand.
    """

    email: EmailStr = Field(..., description="Invitee email address")
    subaccount_id: UUID = Field(..., description="Franchise to invite into")
    role: str = Field(RoleName.MANAGER.value, description="MANAGER or TRAINER")
    message: Optional[str] = Field(None, max_length=1000, description="Personal note")


@router.get("/options", status_code=status.HTTP_200_OK, response_model=InviteOptionsResponse)
async def list_invite_options(
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Franchises the caller owns and the roles they can invite as"""
    use_case = ListInviteOptionsUseCase(uow)
    result = await use_case.execute(context)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse)
async def invite_manager(
    request: InviteManagerRequest,
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite Manager

    Creates a pending invitation and returns its deep link. No e-mail is sent.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: NOT_AN_OWNER
        - 404 Not Found: SUBACCOUNT_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_PENDING
        - 500 Internal Server Error: STATUS_NOT_FOUND
    """
    command = InviteManagerCommand(
        email=request.email,
        subaccount_id=request.subaccount_id,
        role=request.role,
        message=request.message,
    )

    use_case = InviteManagerUseCase(uow)
    result = await use_case.execute(context, command)

    if result.is_err():
        error = result.error
        if error.code == "SUBACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "NOT_AN_OWNER":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVITATION_ALREADY_PENDING":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
