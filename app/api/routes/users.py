import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.api.schemas.common import InsertResult, UpdateResult
from app.api.schemas.user import AccessTokenResponse, AdminStatus, UserExistsResponse, UserRequest
from app.core.db import get_session
from app.core.security import create_access_token
from app.models.user import UserCreate, UserPublic
from app.services.user_service import (
    Role,
    create_user,
    get_user_by_email,
    list_users,
    promote_to_admin,
    resolve_role,
    user_to_public,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("/jwt", response_model=AccessTokenResponse)
async def issue_token(
    email: str = Query(""),
    session: AsyncSession = Depends(get_session),
):
    """Sign a one-day token for a registered email; 403 with an empty token otherwise."""
    user = await get_user_by_email(session, email) if email else None
    if not user:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=AccessTokenResponse(access_token="").model_dump(by_alias=True),
        )
    return AccessTokenResponse(access_token=create_access_token(user.email))


@router.get("/users", response_model=list[UserPublic])
async def all_users(
    session: AsyncSession = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> list[UserPublic]:
    return [user_to_public(u) for u in await list_users(session)]


@router.get("/users/admin/{email}", response_model=AdminStatus)
async def admin_status(
    email: str,
    session: AsyncSession = Depends(get_session),
):
    if await resolve_role(session, email) != Role.ADMIN:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=AdminStatus(is_admin=False).model_dump(by_alias=True),
        )
    return AdminStatus(is_admin=True)


@router.post("/users", response_model=InsertResult | UserExistsResponse)
async def register_user(
    body: UserRequest,
    session: AsyncSession = Depends(get_session),
) -> InsertResult | UserExistsResponse:
    user = await create_user(session, UserCreate(email=body.email, name=body.name))
    if not user:
        return UserExistsResponse(message=f"A user with email {body.email} already exists")
    return InsertResult(inserted_id=user.id)


@router.put("/users/admin/{user_id}", response_model=UpdateResult)
async def make_admin(
    user_id: int,
    session: AsyncSession = Depends(get_session),
    admin_email: str = Depends(require_admin),
) -> UpdateResult:
    matched, modified = await promote_to_admin(session, user_id)
    if modified:
        logger.info("User %s promoted to admin by %s", user_id, admin_email)
    return UpdateResult(matched_count=matched, modified_count=modified)
