from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.auth.dependencies import get_current_user
from membership_app.db.database import get_session
from membership_app.services.membership_validation import (
    MembershipCoverageResponse,
    get_membership_coverage_for_user,
)

router = APIRouter(
    prefix="/user",
    tags=["User"],
)


@router.get("/info")
async def get_my_profile(user=Depends(get_current_user)):
    return user


@router.get(
    "/memberships/{membershipId}/coverage",
    response_model=MembershipCoverageResponse,
)
async def get_my_membership_coverage(
    membershipId: UUID,
    season_id: UUID = Query(..., alias="seasonId"),
    user=Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> MembershipCoverageResponse:
    return await get_membership_coverage_for_user(
        session, UUID(user["id"]), membershipId, season_id
    )
