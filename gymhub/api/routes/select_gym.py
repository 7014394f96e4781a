from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from gymhub.api.error import ClientError, ServerError
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.tenants import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateGymResponse,
    CreateGymUseCase,
    GymChoicesResponse,
    ListGymChoicesUseCase,
)
from gymhub.depends import get_tenant_context, get_unit_of_work
from gymhub.domain.context import TenantContext

router = APIRouter(prefix="/select-gym", tags=["Select Gym"])


@router.get("", status_code=status.HTTP_200_OK, response_model=GymChoicesResponse)
async def list_gym_choices(
    token: Optional[str] = Query(None, description="Invitation token from a deep link"),
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Pending Invitations

    redirect_to is /onboarding when there is nothing to choose from.

    Raises:
        - 404 Not Found: INVALID_INVITATION_LINK when the token matches nothing
    """
    use_case = ListGymChoicesUseCase(uow)
    result = await use_case.execute(context, token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_INVITATION_LINK":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/invitations/{invitation_id}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    invitation_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Joins the franchise and returns a token scoped to it.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND, SUBACCOUNT_NOT_FOUND, ACCOUNT_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED, ALREADY_MEMBER
        - 500 Internal Server Error: STATUS_NOT_FOUND, ROLE_NOT_FOUND
    """
    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(context, invitation_id)

    if result.is_err():
        error = result.error
        if error.code in ("INVITATION_NOT_FOUND", "SUBACCOUNT_NOT_FOUND", "ACCOUNT_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("INVITATION_ALREADY_ACCEPTED", "ALREADY_MEMBER"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/new-gym", status_code=status.HTTP_200_OK, response_model=CreateGymResponse
)
async def create_gym(
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Start a New Gym

    Pending invitations are left as they are.

    Raises:
        - 404 Not Found: IDENTITY_NOT_FOUND
        - 500 Internal Server Error: ROLE_NOT_FOUND
    """
    use_case = CreateGymUseCase(uow)
    result = await use_case.execute(context)

    if result.is_err():
        error = result.error
        if error.code == "IDENTITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
