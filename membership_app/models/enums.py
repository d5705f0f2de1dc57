from enum import Enum
from typing import Type

import sqlalchemy as sa


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
    REFUNDED = "refunded"


def value_enum(enum_cls: Type[Enum]) -> sa.Enum:
    """Column type that stores enum *values*, matching the text CHECK
    constraints on the Supabase tables (SQLAlchemy stores names by default)."""
    return sa.Enum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=32,
    )
