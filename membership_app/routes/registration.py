from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.db.database import get_session
from membership_app.services.registration import (
    RegistrationDetailResponse,
    get_registration_detail,
)
from membership_app.services.registration_counts import (
    count_paid_registrations,
    count_paid_registrations_by_category,
)

router = APIRouter(
    prefix="/registrations",
    tags=["Registration"],
)


@router.get("/categories/counts", response_model=Dict[str, int])
async def get_category_counts(
    category_ids: List[str] = Query(default=[], alias="categoryId"),
    session: AsyncSession = Depends(get_session),
) -> Dict[str, int]:
    return await count_paid_registrations_by_category(session, category_ids)


@router.get("/categories/{categoryId}/count", response_model=int)
async def get_category_count(
    categoryId: str,
    session: AsyncSession = Depends(get_session),
) -> int:
    return await count_paid_registrations(session, categoryId)


@router.get("/{registrationId}", response_model=RegistrationDetailResponse)
async def get_registration(
    registrationId: UUID,
    presale_code: Optional[str] = Query(default=None, alias="presaleCode"),
    session: AsyncSession = Depends(get_session),
) -> RegistrationDetailResponse:
    return await get_registration_detail(session, registrationId, presale_code)
