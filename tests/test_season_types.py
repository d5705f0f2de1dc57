import calendar
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from membership_app.services.season_types import (
    SEASON_TYPES,
    SeasonTypeKey,
    calculate_season_dates,
    generate_season_name,
    get_season_type_by_key,
    list_season_types,
)

FALL_WINTER = SEASON_TYPES[SeasonTypeKey.FALL_WINTER]
SPRING_SUMMER = SEASON_TYPES[SeasonTypeKey.SPRING_SUMMER]


def test_registry_has_one_entry_per_key():
    assert set(SEASON_TYPES) == set(SeasonTypeKey)
    for key, season_type in SEASON_TYPES.items():
        assert season_type.key == key
    assert [t.key for t in list_season_types()] == [
        SeasonTypeKey.FALL_WINTER,
        SeasonTypeKey.SPRING_SUMMER,
    ]


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SEASON_TYPES["winter"] = FALL_WINTER
    with pytest.raises(FrozenInstanceError):
        FALL_WINTER.start_month = 10


def test_lookup_by_plain_string():
    assert get_season_type_by_key("fall_winter") is FALL_WINTER
    assert get_season_type_by_key("spring_summer") is SPRING_SUMMER


@pytest.mark.parametrize("key", ["", "summer", "FALL_WINTER", "fall-winter", None, ["fall_winter"]])
def test_lookup_unknown_key_returns_none(key):
    assert get_season_type_by_key(key) is None


def test_fall_winter_2023_ends_on_leap_day():
    dates = calculate_season_dates(FALL_WINTER, 2023)
    assert dates.start_date == date(2023, 9, 1)
    assert dates.end_date == date(2024, 2, 29)


def test_fall_winter_2024_ends_on_feb_28():
    dates = calculate_season_dates(FALL_WINTER, 2024)
    assert dates.start_date == date(2024, 9, 1)
    assert dates.end_date == date(2025, 2, 28)


@pytest.mark.parametrize(
    "start_year, expected_end",
    [
        (1899, date(1900, 2, 28)),  # divisible by 100, not by 400
        (1999, date(2000, 2, 29)),  # divisible by 400
        (2099, date(2100, 2, 28)),
        (2027, date(2028, 2, 29)),
    ],
)
def test_fall_winter_century_leap_rules(start_year, expected_end):
    assert calculate_season_dates(FALL_WINTER, start_year).end_date == expected_end


def test_fall_winter_end_matches_calendar_for_many_years():
    for year in range(1990, 2110):
        end_date = calculate_season_dates(FALL_WINTER, year).end_date
        assert end_date.year == year + 1
        assert end_date.month == 2
        assert (end_date.day == 29) == calendar.isleap(year + 1)


def test_spring_summer_2023():
    dates = calculate_season_dates(SPRING_SUMMER, 2023)
    assert dates.start_date == date(2023, 3, 1)
    assert dates.end_date == date(2023, 8, 31)


def test_end_date_always_after_start_date():
    for season_type in list_season_types():
        for year in (1, 1970, 2000, 2023, 2024, 9998):
            dates = calculate_season_dates(season_type, year)
            assert dates.end_date > dates.start_date


def test_out_of_range_year_propagates_date_error():
    with pytest.raises(ValueError):
        calculate_season_dates(SPRING_SUMMER, 0)
    with pytest.raises(ValueError):
        # the season itself starts in 9999 but would end in year 10000
        calculate_season_dates(FALL_WINTER, 9999)


def test_generate_season_name():
    assert generate_season_name(FALL_WINTER, 2025) == "Fall/Winter 2025"
    assert generate_season_name(SPRING_SUMMER, 1999) == "Spring/Summer 1999"
