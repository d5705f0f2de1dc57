from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

from membership_app.models.enums import PaymentStatus, value_enum


class UserRegistration(SQLModel, table=True):
    __tablename__ = "user_registrations"
    __table_args__ = (UniqueConstraint("user_id", "registration_id"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id")
    registration_id: UUID = Field(foreign_key="registrations.id")
    registration_category_id: Optional[UUID] = Field(
        default=None, foreign_key="registration_categories.id", nullable=True
    )
    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING, sa_type=value_enum(PaymentStatus)
    )
    registration_fee: Optional[int] = Field(default=None, nullable=True)
    amount_paid: Optional[int] = Field(default=None, nullable=True)
    registered_at: Optional[datetime] = Field(default=None, nullable=True)
    created_at: datetime = Field(default_factory=datetime.now)
