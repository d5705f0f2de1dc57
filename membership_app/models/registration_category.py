from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import SQLModel, Field


class RegistrationCategory(SQLModel, table=True):
    __tablename__ = "registration_categories"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    registration_id: UUID = Field(foreign_key="registrations.id")
    custom_name: str
    price: int  # cents
    max_capacity: Optional[int] = Field(default=None, nullable=True)
    accounting_code: Optional[str] = Field(default=None, nullable=True)
    required_membership_id: Optional[UUID] = Field(
        default=None, foreign_key="memberships.id", nullable=True
    )
    sort_order: int = Field(default=0)
    created_at: datetime = Field(default_factory=datetime.now)
