"""Season type catalog and season date arithmetic.

A season type is a recurring annual template (Fall/Winter, Spring/Summer).
A season instance is one realization of a type for a concrete start year;
its dates are always recomputed from the catalog and never stored here.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional


class SeasonTypeKey(str, Enum):
    FALL_WINTER = "fall_winter"
    SPRING_SUMMER = "spring_summer"


@dataclass(frozen=True)
class SeasonType:
    key: SeasonTypeKey
    name: str
    description: str
    start_month: int
    start_day: int
    duration_months: int  # descriptive only, the end date comes from the fields below
    end_month: int
    end_year_offset: int = 0


@dataclass(frozen=True)
class SeasonDates:
    start_date: date
    end_date: date


SEASON_TYPES: Mapping[str, SeasonType] = MappingProxyType(
    {
        SeasonTypeKey.FALL_WINTER: SeasonType(
            key=SeasonTypeKey.FALL_WINTER,
            name="Fall/Winter",
            description="September through February",
            start_month=9,
            start_day=1,
            duration_months=6,
            end_month=2,
            end_year_offset=1,
        ),
        SeasonTypeKey.SPRING_SUMMER: SeasonType(
            key=SeasonTypeKey.SPRING_SUMMER,
            name="Spring/Summer",
            description="March through August",
            start_month=3,
            start_day=1,
            duration_months=6,
            end_month=8,
        ),
    }
)


def list_season_types() -> List[SeasonType]:
    return list(SEASON_TYPES.values())


def get_season_type_by_key(key: str) -> Optional[SeasonType]:
    """Return the catalog entry for ``key`` or ``None`` when it is unknown."""
    try:
        return SEASON_TYPES.get(key)
    except TypeError:
        # unhashable input can never be a key
        return None


def _last_day_of_month(year: int, month: int) -> date:
    # The day before the 1st of the following month; February's length
    # comes from the calendar instead of leap-year arithmetic.
    if month == 12:
        first_of_next = date(year + 1, 1, 1)
    else:
        first_of_next = date(year, month + 1, 1)
    return first_of_next - timedelta(days=1)


def calculate_season_dates(season_type: SeasonType, start_year: int) -> SeasonDates:
    """Compute the concrete start and end dates of a season instance.

    The year is not validated; years outside what :class:`datetime.date`
    supports raise its ``ValueError`` unchanged.
    """
    start_date = date(start_year, season_type.start_month, season_type.start_day)
    end_date = _last_day_of_month(
        start_year + season_type.end_year_offset, season_type.end_month
    )
    return SeasonDates(start_date=start_date, end_date=end_date)


def generate_season_name(season_type: SeasonType, start_year: int) -> str:
    return f"{season_type.name} {start_year}"
