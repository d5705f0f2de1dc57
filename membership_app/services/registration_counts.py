import logging
from typing import Dict, Sequence, Union
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.models import PaymentStatus, UserRegistration

logger = logging.getLogger(__name__)


async def count_paid_registrations(
    session: AsyncSession,
    category_id: Union[str, UUID],
) -> int:
    """Count paid registrations for a single registration category.

    Failures are not propagated: a bad identifier or a storage error is
    logged and reported as a count of zero, so a caller cannot distinguish
    "no paid registrations" from "query failed" by the return value alone.
    A failure rolls the session back, expiring any instances the caller
    has loaded on it.
    """
    try:
        category_uuid = category_id if isinstance(category_id, UUID) else UUID(str(category_id))
    except ValueError:
        logger.warning("Invalid registration category id %r, counting as 0", category_id)
        return 0

    statement = (
        select(func.count())
        .select_from(UserRegistration)
        .where(
            UserRegistration.registration_category_id == category_uuid,
            UserRegistration.payment_status == PaymentStatus.PAID,
        )
    )
    try:
        result = await session.exec(statement)
        return int(result.one())
    except SQLAlchemyError:
        logger.warning(
            "Failed to count paid registrations for category %s, counting as 0",
            category_id,
            exc_info=True,
        )
        await session.rollback()
        return 0


async def count_paid_registrations_by_category(
    session: AsyncSession,
    category_ids: Sequence[Union[str, UUID]],
) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    # One query per category, in order; each one fails open independently.
    for category_id in category_ids:
        counts[str(category_id)] = await count_paid_registrations(session, category_id)
    return counts
