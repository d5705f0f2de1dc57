from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.auth.dependencies import require_admin
from membership_app.db.database import get_session
from membership_app.models import Season
from membership_app.services.season import (
    CreateSeasonCommand,
    SeasonPreviewResponse,
    SeasonTypeResponse,
    create_season,
    get_seasons,
    preview_season,
    season_type_response,
)
from membership_app.services.season_types import list_season_types

router = APIRouter(
    prefix="/seasons",
    tags=["Season"],
)


@router.get("", response_model=List[Season])
async def list_seasons(session: AsyncSession = Depends(get_session)) -> List[Season]:
    return await get_seasons(session)


@router.post("", response_model=Season, status_code=201)
async def create_new_season(
    command: CreateSeasonCommand,
    user=Depends(require_admin),
    session: AsyncSession = Depends(get_session),
) -> Season:
    return await create_season(session, command)


@router.get("/types", response_model=List[SeasonTypeResponse])
async def get_season_types() -> List[SeasonTypeResponse]:
    return [season_type_response(season_type) for season_type in list_season_types()]


@router.get("/types/{key}/preview", response_model=SeasonPreviewResponse)
async def get_season_preview(
    key: str,
    start_year: int = Query(..., alias="startYear"),
) -> SeasonPreviewResponse:
    return preview_season(key, start_year)
