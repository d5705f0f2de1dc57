import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from membership_app.models import Season
from membership_app.services.season_types import (
    SeasonType,
    SeasonTypeKey,
    calculate_season_dates,
    generate_season_name,
    get_season_type_by_key,
)

logger = logging.getLogger(__name__)


class SeasonTypeResponse(SQLModel):
    key: SeasonTypeKey
    name: str
    description: str
    start_month: int
    start_day: int
    duration_months: int


class SeasonPreviewResponse(SQLModel):
    name: str
    type: SeasonTypeKey
    start_date: date
    end_date: date


class CreateSeasonCommand(SQLModel):
    type: str
    start_year: int
    is_active: bool = True


def season_type_response(season_type: SeasonType) -> SeasonTypeResponse:
    return SeasonTypeResponse(
        key=season_type.key,
        name=season_type.name,
        description=season_type.description,
        start_month=season_type.start_month,
        start_day=season_type.start_day,
        duration_months=season_type.duration_months,
    )


def _season_type_or_error(key: str, status_code: int) -> SeasonType:
    season_type = get_season_type_by_key(key)
    if season_type is None:
        raise HTTPException(status_code=status_code, detail=f"Unknown season type '{key}'")
    return season_type


def preview_season(key: str, start_year: int) -> SeasonPreviewResponse:
    season_type = _season_type_or_error(key, 404)
    try:
        dates = calculate_season_dates(season_type, start_year)
    except (ValueError, OverflowError):
        raise HTTPException(status_code=400, detail="Invalid start year")
    return SeasonPreviewResponse(
        name=generate_season_name(season_type, start_year),
        type=season_type.key,
        start_date=dates.start_date,
        end_date=dates.end_date,
    )


async def get_seasons(session: AsyncSession) -> List[Season]:
    result = await session.exec(select(Season).order_by(Season.start_date))
    return result.all()


async def get_season_or_404(session: AsyncSession, season_id: UUID) -> Season:
    season = await session.get(Season, season_id)
    if season is None:
        raise HTTPException(status_code=404, detail="Season not found")
    return season


async def season_exists_for_year(
    session: AsyncSession, key: SeasonTypeKey, start_year: int
) -> bool:
    result = await session.exec(
        select(Season).where(
            Season.type == key,
            Season.start_date >= date(start_year, 1, 1),
            Season.start_date <= date(start_year, 12, 31),
        )
    )
    return result.first() is not None


async def create_season(
    session: AsyncSession,
    command: CreateSeasonCommand,
    today: Optional[date] = None,
) -> Season:
    season_type = _season_type_or_error(command.type, 400)
    try:
        dates = calculate_season_dates(season_type, command.start_year)
    except (ValueError, OverflowError):
        raise HTTPException(status_code=400, detail="Invalid start year")

    today = today or date.today()
    if dates.end_date < today:
        raise HTTPException(
            status_code=400,
            detail=f"This season would end in the past ({dates.end_date.isoformat()})",
        )

    if await season_exists_for_year(session, season_type.key, command.start_year):
        raise HTTPException(
            status_code=409,
            detail=(
                f"A {season_type.name.lower()} season for {command.start_year} "
                "already exists"
            ),
        )

    season = Season(
        name=generate_season_name(season_type, command.start_year),
        type=season_type.key,
        start_date=dates.start_date,
        end_date=dates.end_date,
        is_active=command.is_active,
    )
    session.add(season)
    await session.commit()
    await session.refresh(season)
    logger.info("Created season %s (%s)", season.name, season.id)
    return season
