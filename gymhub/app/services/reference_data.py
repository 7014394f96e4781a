"""
Reference Data

Seeds the roles and status lookup tables that the onboarding and invitation
flows resolve by name.
"""

import logging

from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.entities import Role, RoleName, Status, StatusName

logger = logging.getLogger(__name__)


async def seed_reference_data(uow: UnitOfWork) -> int:
    """
    Insert any missing role and status rows.

    Safe to run on every start-up: existing rows are left untouched.

    Returns:
        Number of rows inserted
    """
    inserted = 0
    async with uow:
        existing_roles = {role.name for role in await uow.roles.get_all()}
        for role_name in RoleName:
            if role_name.value not in existing_roles:
                await uow.roles.create(Role(name=role_name.value))
                inserted += 1

        existing_statuses = {status.name for status in await uow.statuses.get_all()}
        for status_name in StatusName:
            if status_name.value not in existing_statuses:
                await uow.statuses.create(Status(name=status_name.value))
                inserted += 1

        await uow.commit()

    if inserted:
        logger.info(f"Seeded {inserted} reference rows")
    return inserted
