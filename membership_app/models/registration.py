from datetime import date, datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import SQLModel, Field

from membership_app.models.enums import value_enum


class RegistrationType(str, Enum):
    TEAM = "team"
    SCRIMMAGE = "scrimmage"
    EVENT = "event"


class Registration(SQLModel, table=True):
    __tablename__ = "registrations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    season_id: UUID = Field(foreign_key="seasons.id")
    name: str
    type: RegistrationType = Field(
        default=RegistrationType.TEAM, sa_type=value_enum(RegistrationType)
    )
    allow_discounts: bool = Field(default=True)
    is_active: bool = Field(default=False)  # False keeps the registration a hidden draft
    presale_start_at: Optional[datetime] = Field(default=None, nullable=True)
    regular_start_at: Optional[datetime] = Field(default=None, nullable=True)
    registration_end_at: Optional[datetime] = Field(default=None, nullable=True)
    presale_code: Optional[str] = Field(default=None, nullable=True)
    start_date: Optional[date] = Field(default=None, nullable=True)
    end_date: Optional[date] = Field(default=None, nullable=True)
    created_at: datetime = Field(default_factory=datetime.now)
