"""initial schema

Revision ID: 0001
Revises:
Create Date: 2025-08-01 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PAYMENT_STATUSES = ("pending", "processing", "paid", "refunded")


def _value_enum(name: str, values) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=32)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_table(
        "seasons",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column(
            "type",
            _value_enum("seasontypekey", ("fall_winter", "spring_summer")),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "memberships",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("price_monthly", sa.Integer(), nullable=False),
        sa.Column("price_annual", sa.Integer(), nullable=False),
        sa.Column("accounting_code", sa.String(), nullable=True),
        sa.Column("allow_discounts", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "registrations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("season_id", sa.Uuid(), sa.ForeignKey("seasons.id"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column(
            "type",
            _value_enum("registrationtype", ("team", "scrimmage", "event")),
            nullable=False,
        ),
        sa.Column("allow_discounts", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("presale_start_at", sa.DateTime(), nullable=True),
        sa.Column("regular_start_at", sa.DateTime(), nullable=True),
        sa.Column("registration_end_at", sa.DateTime(), nullable=True),
        sa.Column("presale_code", sa.String(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "registration_categories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "registration_id", sa.Uuid(), sa.ForeignKey("registrations.id"), nullable=False
        ),
        sa.Column("custom_name", sa.String(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("max_capacity", sa.Integer(), nullable=True),
        sa.Column("accounting_code", sa.String(), nullable=True),
        sa.Column(
            "required_membership_id", sa.Uuid(), sa.ForeignKey("memberships.id"), nullable=True
        ),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "user_memberships",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("membership_id", sa.Uuid(), sa.ForeignKey("memberships.id"), nullable=False),
        sa.Column("valid_from", sa.Date(), nullable=False),
        sa.Column("valid_until", sa.Date(), nullable=False),
        sa.Column("months_purchased", sa.Integer(), nullable=True),
        sa.Column(
            "payment_status", _value_enum("paymentstatus", PAYMENT_STATUSES), nullable=False
        ),
        sa.Column("amount_paid", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "user_registrations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "registration_id", sa.Uuid(), sa.ForeignKey("registrations.id"), nullable=False
        ),
        sa.Column(
            "registration_category_id",
            sa.Uuid(),
            sa.ForeignKey("registration_categories.id"),
            nullable=True,
        ),
        sa.Column(
            "payment_status", _value_enum("paymentstatus", PAYMENT_STATUSES), nullable=False
        ),
        sa.Column("registration_fee", sa.Integer(), nullable=True),
        sa.Column("amount_paid", sa.Integer(), nullable=True),
        sa.Column("registered_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("user_id", "registration_id"),
    )
    op.create_index(
        "ix_user_registrations_category_status",
        "user_registrations",
        ["registration_category_id", "payment_status"],
    )


def downgrade() -> None:
    op.drop_index("ix_user_registrations_category_status", table_name="user_registrations")
    op.drop_table("user_registrations")
    op.drop_table("user_memberships")
    op.drop_table("registration_categories")
    op.drop_table("registrations")
    op.drop_table("memberships")
    op.drop_table("seasons")
    op.drop_table("users")
