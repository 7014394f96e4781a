from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from gymhub.api.error import ClientError, ServerError
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.tenants import SwitchGymResponse, SwitchGymUseCase
from gymhub.depends import get_tenant_context, get_unit_of_work
from gymhub.domain.context import TenantContext

router = APIRouter(prefix="/context", tags=["Context"])


class SwitchGymRequest(BaseModel):
    """
    Switch gym HTTP request payload

    Validates incoming request for switching the active gym.
    """

    account_id: UUID = Field(..., description="Target gym ID")
    subaccount_id: Optional[UUID] = Field(None, description="Target franchise ID")


@router.post("/switch", status_code=status.HTTP_200_OK, response_model=SwitchGymResponse)
async def switch_gym(
    request: SwitchGymRequest,
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Switch Active Gym

    Returns a new access token scoped to the target gym.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    use_case = SwitchGymUseCase(uow)
    result = await use_case.execute(context, request.account_id, request.subaccount_id)

    if result.is_err():
        error = result.error
        if error.code == "NOT_A_MEMBER":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
