# membership_app/db/database.py
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
import os
from dotenv import load_dotenv

# Load environment variables from a .env file if present so that running the
# application locally works without manually exporting variables.
load_dotenv()

DATABASE_URL = os.getenv("DB_URL")  # Supabase Postgres connection string

if not DATABASE_URL:
    raise RuntimeError("DB_URL is not set in environment variables")


def to_async_url(url: str) -> str:
    """Rewrite a Postgres URL so that it uses the ``asyncpg`` driver.

    Supabase hands out plain ``postgresql://`` URLs and Alembic runs with
    ``+psycopg``; the application engine needs ``+asyncpg``.  Non-Postgres
    URLs (the SQLite database used by the tests) are returned unchanged.
    """
    if "+asyncpg" in url:
        return url
    if "+psycopg" in url:
        return url.replace("+psycopg", "+asyncpg")
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def to_sync_url(url: str) -> str:
    """Alembic runs synchronously, so swap async drivers for sync ones."""
    if "+asyncpg" in url:
        return url.replace("+asyncpg", "+psycopg")
    if "+aiosqlite" in url:
        return url.replace("+aiosqlite", "")
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    return url


engine: AsyncEngine = create_async_engine(to_async_url(DATABASE_URL))

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

async def get_session():
    async with AsyncSession(engine) as session:
        yield session
