from enum import Enum
from typing import List, Optional, Sequence

from sqlmodel import SQLModel


class CategoryCapacity(SQLModel):
    id: str
    name: str
    max_capacity: Optional[int] = None
    current_count: int = 0
    accounting_code: Optional[str] = None


class CapacitySummary(SQLModel):
    total_capacity: Optional[int] = None
    total_current: int = 0
    has_capacity_limits: bool = False


class CapacityStatus(str, Enum):
    ENDED = "ended"
    FULL = "full"
    OPEN = "open"


def calculate_total_capacity(categories: Sequence[CategoryCapacity]) -> CapacitySummary:
    """Sum capacity and paid counts across the categories of one registration.

    ``total_capacity`` is ``None`` when no category is limited.  When at least
    one category is limited, unlimited categories contribute nothing to it.
    """
    if not categories:
        return CapacitySummary()

    has_capacity_limits = any(category.max_capacity is not None for category in categories)
    total_capacity = (
        sum(category.max_capacity or 0 for category in categories)
        if has_capacity_limits
        else None
    )
    total_current = sum(category.current_count for category in categories)
    return CapacitySummary(
        total_capacity=total_capacity,
        total_current=total_current,
        has_capacity_limits=has_capacity_limits,
    )


def get_accounting_codes(categories: Sequence[CategoryCapacity]) -> List[str]:
    codes: List[str] = []
    for category in categories:
        code = category.accounting_code
        if code is None or not code.strip():
            continue
        if code not in codes:
            codes.append(code)
    return codes


def is_registration_at_capacity(categories: Sequence[CategoryCapacity]) -> bool:
    summary = calculate_total_capacity(categories)
    return (
        summary.has_capacity_limits
        and summary.total_capacity is not None
        and summary.total_current >= summary.total_capacity
    )


def get_capacity_status(
    categories: Sequence[CategoryCapacity],
    is_season_ended: bool,
) -> CapacityStatus:
    if is_season_ended:
        return CapacityStatus.ENDED
    if is_registration_at_capacity(categories):
        return CapacityStatus.FULL
    return CapacityStatus.OPEN


def format_capacity_display(categories: Sequence[CategoryCapacity]) -> str:
    summary = calculate_total_capacity(categories)
    if not summary.has_capacity_limits:
        if summary.total_current > 0:
            return f"{summary.total_current} registered"
        return "No registrations"
    return f"{summary.total_current}/{summary.total_capacity} spots"
