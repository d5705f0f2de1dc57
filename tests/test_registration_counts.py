import asyncio
from datetime import date
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from membership_app.main import app
from membership_app.models import (
    PaymentStatus,
    Registration,
    RegistrationCategory,
    Season,
    User,
    UserRegistration,
)
from membership_app.services.registration_counts import (
    count_paid_registrations,
    count_paid_registrations_by_category,
)
from membership_app.services.season_types import SeasonTypeKey
from tests.conftest import AsyncSessionLocal


async def _prepare_registrations():
    """Category A: 3 paid + 1 pending.  Category B: only unpaid rows."""
    async with AsyncSessionLocal() as session:
        season = Season(
            name="Fall/Winter 2030",
            type=SeasonTypeKey.FALL_WINTER,
            start_date=date(2030, 9, 1),
            end_date=date(2031, 2, 28),
        )
        session.add(season)
        await session.flush()

        registrations = [
            Registration(season_id=season.id, name=f"League {n}", is_active=True)
            for n in range(5)
        ]
        session.add_all(registrations)
        await session.flush()

        category_a = RegistrationCategory(
            registration_id=registrations[0].id, custom_name="Skater", price=25000, max_capacity=20
        )
        category_b = RegistrationCategory(
            registration_id=registrations[0].id, custom_name="Goalie", price=0, max_capacity=2
        )
        session.add_all([category_a, category_b])
        await session.flush()

        users = [
            User(email=f"player{n}@example.com", first_name="Player", last_name=str(n))
            for n in range(5)
        ]
        session.add_all(users)
        await session.flush()

        rows = [
            (users[0], registrations[0], category_a, PaymentStatus.PAID),
            (users[1], registrations[0], category_a, PaymentStatus.PAID),
            (users[2], registrations[0], category_a, PaymentStatus.PAID),
            (users[3], registrations[0], category_a, PaymentStatus.PENDING),
            (users[4], registrations[0], category_b, PaymentStatus.PROCESSING),
            (users[0], registrations[1], category_b, PaymentStatus.REFUNDED),
        ]
        session.add_all(
            [
                UserRegistration(
                    user_id=user.id,
                    registration_id=registration.id,
                    registration_category_id=category.id,
                    payment_status=status,
                )
                for user, registration, category, status in rows
            ]
        )
        await session.commit()
        return str(category_a.id), str(category_b.id)


@pytest.fixture(scope="module")
def categories():
    return asyncio.run(_prepare_registrations())


@pytest.mark.asyncio
async def test_count_by_category_counts_only_paid_rows(categories):
    category_a, category_b = categories

    async with AsyncSessionLocal() as session:
        counts = await count_paid_registrations_by_category(session, [category_a, category_b])

    assert counts == {category_a: 3, category_b: 0}
    assert list(counts) == [category_a, category_b]


@pytest.mark.asyncio
async def test_count_by_category_empty_input(categories):
    async with AsyncSessionLocal() as session:
        assert await count_paid_registrations_by_category(session, []) == {}


@pytest.mark.asyncio
async def test_single_category_count_is_plain_integer(categories):
    category_a, _ = categories

    async with AsyncSessionLocal() as session:
        count = await count_paid_registrations(session, category_a)

    assert count == 3
    assert isinstance(count, int)


@pytest.mark.asyncio
async def test_unknown_and_malformed_categories_count_as_zero(categories):
    category_a, _ = categories
    unknown = str(uuid4())

    async with AsyncSessionLocal() as session:
        counts = await count_paid_registrations_by_category(
            session, ["not-a-uuid", unknown, category_a]
        )

    assert counts == {"not-a-uuid": 0, unknown: 0, category_a: 3}


class _FailingOnceSession:
    """Wraps a real session and raises a storage error on the first query."""

    def __init__(self, session):
        self._session = session
        self.failures = 0
        self.rollbacks = 0

    async def exec(self, statement):
        if self.failures == 0:
            self.failures += 1
            raise OperationalError("SELECT count(*)", {}, Exception("database unavailable"))
        return await self._session.exec(statement)

    async def rollback(self):
        self.rollbacks += 1
        await self._session.rollback()


@pytest.mark.asyncio
async def test_storage_failure_fails_open_to_zero_for_that_category(categories, caplog):
    category_a, category_b = categories

    async with AsyncSessionLocal() as session:
        failing = _FailingOnceSession(session)
        with caplog.at_level("WARNING", logger="membership_app.services.registration_counts"):
            counts = await count_paid_registrations_by_category(
                failing, [category_a, category_a, category_b]
            )

    # the first query failed and reads as zero, the rest still run
    assert counts == {category_a: 3, category_b: 0}
    assert failing.rollbacks == 1
    assert "Failed to count paid registrations" in caplog.text


def test_counts_endpoint(categories):
    category_a, category_b = categories

    with TestClient(app) as client:
        many = client.get(
            "/registrations/categories/counts",
            params=[("categoryId", category_a), ("categoryId", category_b)],
        )
        none = client.get("/registrations/categories/counts")
        single = client.get(f"/registrations/categories/{category_a}/count")

    assert many.status_code == 200
    assert many.json() == {category_a: 3, category_b: 0}
    assert none.json() == {}
    assert single.status_code == 200
    assert single.json() == 3
