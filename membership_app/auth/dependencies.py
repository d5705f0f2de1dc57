import logging
import os
from jose import jwt, JWTError
from fastapi import Header, HTTPException, Depends
from dotenv import load_dotenv
from sqlmodel.ext.asyncio.session import AsyncSession
from datetime import datetime
from uuid import UUID

from membership_app.db.database import get_session
from membership_app.models import User

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)

SUPABASE_JWT_SECRET = os.getenv("SUPABASE_JWT_SECRET")

if not SUPABASE_JWT_SECRET:
    raise RuntimeError("SUPABASE_JWT_SECRET is not set in environment variables")


def _split_name(metadata: dict, email: str):
    first_name = metadata.get("first_name")
    last_name = metadata.get("last_name")
    if first_name or last_name:
        return first_name or "", last_name or ""

    full_name = (metadata.get("full_name") or "").strip()
    if full_name:
        first, _, last = full_name.partition(" ")
        return first, last.strip()
    return email.split("@")[0], ""


async def get_current_user(
    authorization: str = Header(...),
    session: AsyncSession = Depends(get_session)
):
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Bearer token")

    token = authorization.split(" ")[1]

    try:
        payload = jwt.decode(
            token,
            SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_aud": False}
        )
    except JWTError as e:
        logger.warning("JWT decode error: %s", e)
        raise HTTPException(status_code=401, detail="Invalid token")

    try:
        user_id = UUID(payload.get("sub") or "")
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token subject")

    email = payload.get("email") or ""

    db_user = await session.get(User, user_id)
    if not db_user:
        first_name, last_name = _split_name(payload.get("user_metadata") or {}, email)
        db_user = User(
            id=user_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            created_at=datetime.now(),
            updated_at=datetime.now()
        )
        session.add(db_user)
        await session.commit()
        await session.refresh(db_user)

    return {
        "id": str(db_user.id),
        "email": db_user.email,
        "firstName": db_user.first_name,
        "lastName": db_user.last_name,
        "isAdmin": db_user.is_admin,
    }


async def require_admin(user=Depends(get_current_user)):
    if not user.get("isAdmin"):
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
