from fastapi import Request, HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from videotube.config.environments import SESSION_COOKIE_NAME
from videotube.db.dependency import get_db
from videotube.model.session import SessionModel
from videotube.model.user import UserModel
from videotube.utility.time import is_expired


def get_session_token(request: Request) -> str | None:
    session_token = request.cookies.get(SESSION_COOKIE_NAME)
    if session_token:
        return session_token

    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return None


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> UserModel:
    session_token = get_session_token(request)
    if not session_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )

    result = await db.execute(
        select(SessionModel).where(SessionModel.session_token == session_token)
    )
    session = result.scalar_one_or_none()

    if not session or is_expired(session.expires_at):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or invalid"
        )

    result = await db.execute(
        select(UserModel).where(UserModel.id == session.user_id)
    )
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    return user


async def get_optional_user(request: Request, db: AsyncSession = Depends(get_db)) -> UserModel | None:
    # unresolvable credentials are treated as an anonymous viewer
    try:
        return await get_current_user(request, db)
    except HTTPException:
        return None
