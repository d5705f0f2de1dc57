from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.models import Registration, RegistrationCategory, Season
from membership_app.services.registration_capacity import (
    CapacityStatus,
    CapacitySummary,
    CategoryCapacity,
    calculate_total_capacity,
    format_capacity_display,
    get_accounting_codes,
    get_capacity_status,
)
from membership_app.services.registration_counts import count_paid_registrations_by_category
from membership_app.services.registration_status import (
    RegistrationStatus,
    get_registration_status,
    get_status_display_text,
    is_registration_available,
)


class RegistrationDetailResponse(SQLModel):
    id: UUID
    name: str
    season_id: UUID
    season_name: str
    status: RegistrationStatus
    status_text: str
    is_available: bool
    capacity_status: CapacityStatus
    capacity: CapacitySummary
    capacity_display: str
    accounting_codes: List[str]
    categories: List[CategoryCapacity]


async def get_registration_or_404(session: AsyncSession, registration_id: UUID) -> Registration:
    registration = await session.get(Registration, registration_id)
    if registration is None:
        raise HTTPException(status_code=404, detail="Registration not found")
    return registration


async def get_registration_categories(
    session: AsyncSession, registration_id: UUID
) -> List[RegistrationCategory]:
    result = await session.exec(
        select(RegistrationCategory)
        .where(RegistrationCategory.registration_id == registration_id)
        .order_by(RegistrationCategory.sort_order)
    )
    return result.all()


async def get_registration_detail(
    session: AsyncSession,
    registration_id: UUID,
    presale_code: Optional[str] = None,
    today: Optional[date] = None,
) -> RegistrationDetailResponse:
    registration = await get_registration_or_404(session, registration_id)
    season = await session.get(Season, registration.season_id)
    categories = await get_registration_categories(session, registration_id)

    # Everything read from ORM instances is taken before counting: a failed
    # count rolls the session back, which expires every loaded instance.
    today = today or date.today()
    is_season_ended = season is not None and season.end_date < today
    status = get_registration_status(registration)
    has_presale_code = bool(
        presale_code
        and registration.presale_code
        and presale_code.strip().upper() == registration.presale_code.strip().upper()
    )
    is_available = is_registration_available(registration, has_presale_code)
    detail = dict(
        id=registration.id,
        name=registration.name,
        season_id=registration.season_id,
        season_name=season.name if season else "",
    )
    capacities = [
        CategoryCapacity(
            id=str(category.id),
            name=category.custom_name,
            max_capacity=category.max_capacity,
            accounting_code=category.accounting_code,
        )
        for category in categories
    ]

    counts = await count_paid_registrations_by_category(
        session, [capacity.id for capacity in capacities]
    )
    for capacity in capacities:
        capacity.current_count = counts.get(capacity.id, 0)

    return RegistrationDetailResponse(
        **detail,
        status=status,
        status_text=get_status_display_text(status),
        is_available=is_available,
        capacity_status=get_capacity_status(capacities, is_season_ended),
        capacity=calculate_total_capacity(capacities),
        capacity_display=format_capacity_display(capacities),
        accounting_codes=get_accounting_codes(capacities),
        categories=capacities,
    )
