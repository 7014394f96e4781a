from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from gymhub.api.error import ClientError, ServerError
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.tenants import STATUS_FILTERS, ListStaffUseCase, StaffListResponse
from gymhub.depends import get_tenant_context, get_unit_of_work
from gymhub.domain.context import TenantContext
from gymhub.libs.result import Error

router = APIRouter(prefix="/managers", tags=["Managers"])


@router.get("", status_code=status.HTTP_200_OK, response_model=StaffListResponse)
async def list_staff(
    search: Optional[str] = Query(None, description="Name, e-mail or franchise"),
    role: str = Query("all", description="Role name or 'all'"),
    status_filter: str = Query("all", alias="status", description="active, inactive or all"),
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Staff

    Staff of the franchises the caller owns, plus pending invitations.

    Raises:
        - 400 Bad Request: Unknown status filter
    """
    if status_filter not in STATUS_FILTERS:
        raise ClientError(
            Error("INVALID_STATUS_FILTER", f"status must be one of: {', '.join(STATUS_FILTERS)}"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    use_case = ListStaffUseCase(uow)
    result = await use_case.execute(context, search, role, status_filter)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
