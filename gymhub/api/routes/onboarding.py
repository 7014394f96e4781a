from fastapi import APIRouter, Depends, status

from gymhub.api.error import ServerError
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.tenants import (
    CompleteOnboardingCommand,
    CompleteOnboardingUseCase,
    OnboardingResponse,
)
from gymhub.depends import get_tenant_context, get_unit_of_work
from gymhub.domain.context import TenantContext

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


@router.post("/complete", status_code=status.HTTP_200_OK, response_model=OnboardingResponse)
async def complete_onboarding(
    request: CompleteOnboardingCommand,
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Onboarding

    Saves gym details, creates the first franchise and makes the caller its
    owner.

    Raises:
        - 500 Internal Server Error: ROLE_NOT_FOUND
    """
    use_case = CompleteOnboardingUseCase(uow)
    result = await use_case.execute(context, request)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
