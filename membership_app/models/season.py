from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import SQLModel, Field

from membership_app.models.enums import value_enum
from membership_app.services.season_types import SeasonTypeKey


class Season(SQLModel, table=True):
    __tablename__ = "seasons"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    type: SeasonTypeKey = Field(sa_type=value_enum(SeasonTypeKey))
    start_date: date
    end_date: date
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.now)
