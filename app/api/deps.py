from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.core.security import decode_access_token
from app.services.user_service import Role, resolve_role

security = HTTPBearer(auto_error=False)


async def get_current_email(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """Verified email of the caller. 401 without a bearer token, 403 for a bad one."""
    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized access",
            headers={"WWW-Authenticate": "Bearer"},
        )
    email = decode_access_token(credentials.credentials)
    if not email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        )
    return email


async def require_admin(
    session: AsyncSession = Depends(get_session),
    email: str = Depends(get_current_email),
) -> str:
    role = await resolve_role(session, email)
    if role != Role.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        )
    return email
