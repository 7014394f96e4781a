from fastapi import APIRouter, Depends, status

from gymhub.api.error import ClientError, ServerError
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.users import ContextResponse, LoadContextUseCase
from gymhub.depends import get_tenant_context, get_unit_of_work
from gymhub.domain.context import TenantContext

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ContextResponse)
async def get_me(
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User & Gym Context

    Returns the identity, the user profile (once one exists) and every gym
    the user belongs to, with the one the token is scoped to as current.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT, or revoked session
        - 404 Not Found: Identity no longer exists
    """
    use_case = LoadContextUseCase(uow)
    result = await use_case.execute(context)

    if result.is_err():
        error = result.error
        if error.code == "IDENTITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
