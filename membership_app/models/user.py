from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import datetime
from typing import Optional

class User(SQLModel, table=True):
    __tablename__ = "users"  # This must match the Supabase table name

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    phone: Optional[str] = Field(default=None, nullable=True)
    is_admin: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
