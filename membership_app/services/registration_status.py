from datetime import datetime, time, timezone
from enum import Enum
from typing import Optional

from membership_app.models import Registration, RegistrationType


class RegistrationStatus(str, Enum):
    DRAFT = "draft"  # is_active is False
    EXPIRED = "expired"  # past registration_end_at
    PAST = "past"  # event/scrimmage that has already ended
    COMING_SOON = "coming_soon"  # before presale or regular start
    PRESALE = "presale"  # between presale start and regular start
    OPEN = "open"


STATUS_DISPLAY_TEXT = {
    RegistrationStatus.DRAFT: "Draft",
    RegistrationStatus.EXPIRED: "Registration Closed",
    RegistrationStatus.PAST: "Past",
    RegistrationStatus.COMING_SOON: "Coming Soon",
    RegistrationStatus.PRESALE: "Pre-Sale",
    RegistrationStatus.OPEN: "Open",
}


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; Postgres timestamptz does not.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_registration_status(
    registration: Registration,
    now: Optional[datetime] = None,
) -> RegistrationStatus:
    """Derive the timing status of a registration at ``now`` (default: current UTC time).

    An event or scrimmage counts as past from midnight UTC at the start of
    its ``end_date``.
    """
    now = _as_utc(now or datetime.now(timezone.utc))

    if not registration.is_active:
        return RegistrationStatus.DRAFT

    if (
        registration.type in (RegistrationType.EVENT, RegistrationType.SCRIMMAGE)
        and registration.end_date is not None
        and now > datetime.combine(registration.end_date, time.min, tzinfo=timezone.utc)
    ):
        return RegistrationStatus.PAST

    if registration.registration_end_at and now > _as_utc(registration.registration_end_at):
        return RegistrationStatus.EXPIRED

    regular_start = (
        _as_utc(registration.regular_start_at) if registration.regular_start_at else None
    )

    if registration.presale_start_at:
        presale_start = _as_utc(registration.presale_start_at)
        if now < presale_start:
            return RegistrationStatus.COMING_SOON
        if regular_start is not None and now < regular_start:
            return RegistrationStatus.PRESALE

    if regular_start is not None and now < regular_start:
        return RegistrationStatus.COMING_SOON

    return RegistrationStatus.OPEN


def is_registration_available(
    registration: Registration,
    has_presale_code: bool = False,
    now: Optional[datetime] = None,
) -> bool:
    """Whether a user may purchase this registration right now."""
    status = get_registration_status(registration, now)
    if status == RegistrationStatus.OPEN:
        return True
    if status == RegistrationStatus.PRESALE:
        return has_presale_code
    return False


def get_status_display_text(status: RegistrationStatus) -> str:
    return STATUS_DISPLAY_TEXT.get(status, "Unknown")
