import math
from datetime import date
from typing import List, Optional, Sequence
from uuid import UUID

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.models import Membership, PaymentStatus, UserMembership
from membership_app.services.season import get_season_or_404


class MembershipPurchase(SQLModel):
    membership_id: UUID
    membership_name: str
    valid_until: date
    price_monthly: int = 0


class MembershipValidationResult(SQLModel):
    is_valid: bool
    membership_name: Optional[str] = None
    valid_until: Optional[date] = None
    season_end_date: Optional[date] = None
    months_needed: Optional[int] = None
    days_short: Optional[int] = None


class MembershipCoverageResponse(MembershipValidationResult):
    warning: str = ""
    extension_cost: int = 0


def validate_membership_coverage(
    required_membership_id: UUID,
    purchases: Sequence[MembershipPurchase],
    season_end_date: date,
) -> MembershipValidationResult:
    """Check that a membership covers a season through its last day.

    Renewals are separate purchases, so the purchase with the latest
    ``valid_until`` wins.  Months needed is a rough 30-day estimate.
    """
    matching = [p for p in purchases if p.membership_id == required_membership_id]
    if not matching:
        return MembershipValidationResult(is_valid=False, season_end_date=season_end_date)

    latest = max(matching, key=lambda p: p.valid_until)
    if latest.valid_until >= season_end_date:
        return MembershipValidationResult(
            is_valid=True,
            membership_name=latest.membership_name,
            valid_until=latest.valid_until,
        )

    days_short = (season_end_date - latest.valid_until).days
    return MembershipValidationResult(
        is_valid=False,
        membership_name=latest.membership_name,
        valid_until=latest.valid_until,
        season_end_date=season_end_date,
        months_needed=math.ceil(days_short / 30),
        days_short=days_short,
    )


def format_membership_warning(result: MembershipValidationResult) -> str:
    if result.is_valid:
        return ""
    if not result.membership_name:
        return "You need a membership to register for this category."

    months_text = "month" if result.months_needed == 1 else "months"
    days_text = "day" if result.days_short == 1 else "days"
    return (
        f"Your {result.membership_name} expires {result.days_short} {days_text} "
        f"before the season ends. You'll need to extend your membership by at least "
        f"{result.months_needed} {months_text} to cover the full season."
    )


def calculate_extension_cost(price_monthly: int, months_needed: int) -> int:
    return price_monthly * months_needed


async def get_paid_membership_purchases(
    session: AsyncSession,
    user_id: UUID,
) -> List[MembershipPurchase]:
    statement = (
        select(UserMembership, Membership)
        .join(Membership, Membership.id == UserMembership.membership_id)
        .where(UserMembership.user_id == user_id)
        .where(UserMembership.payment_status == PaymentStatus.PAID)
    )
    result = await session.exec(statement)
    return [
        MembershipPurchase(
            membership_id=membership.id,
            membership_name=membership.name,
            valid_until=user_membership.valid_until,
            price_monthly=membership.price_monthly,
        )
        for user_membership, membership in result.all()
    ]


async def get_membership_coverage_for_user(
    session: AsyncSession,
    user_id: UUID,
    membership_id: UUID,
    season_id: UUID,
) -> MembershipCoverageResponse:
    season = await get_season_or_404(session, season_id)
    purchases = await get_paid_membership_purchases(session, user_id)
    result = validate_membership_coverage(membership_id, purchases, season.end_date)

    extension_cost = 0
    if not result.is_valid and result.months_needed:
        price_monthly = next(
            (p.price_monthly for p in purchases if p.membership_id == membership_id), 0
        )
        extension_cost = calculate_extension_cost(price_monthly, result.months_needed)

    return MembershipCoverageResponse(
        **result.model_dump(),
        warning=format_membership_warning(result),
        extension_cost=extension_cost,
    )
