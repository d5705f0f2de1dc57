from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import SQLModel, Field

from membership_app.models.enums import PaymentStatus, value_enum


class Membership(SQLModel, table=True):
    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    description: Optional[str] = Field(default=None, nullable=True)
    price_monthly: int  # cents
    price_annual: int  # cents
    accounting_code: Optional[str] = Field(default=None, nullable=True)
    allow_discounts: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.now)


class UserMembership(SQLModel, table=True):
    """A single membership purchase; renewals add rows rather than update them."""

    __tablename__ = "user_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id")
    membership_id: UUID = Field(foreign_key="memberships.id")
    valid_from: date
    valid_until: date
    months_purchased: Optional[int] = Field(default=None, nullable=True)
    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING, sa_type=value_enum(PaymentStatus)
    )
    amount_paid: Optional[int] = Field(default=None, nullable=True)
    created_at: datetime = Field(default_factory=datetime.now)
