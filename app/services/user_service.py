from enum import Enum

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import ADMIN_ROLE, User, UserCreate, UserPublic


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def resolve_role(session: AsyncSession, email: str) -> Role:
    """Role of the user with this email. Unknown emails are ordinary users."""
    user = await get_user_by_email(session, email)
    if user is not None and user.role == ADMIN_ROLE:
        return Role.ADMIN
    return Role.USER


async def create_user(session: AsyncSession, data: UserCreate) -> User | None:
    """Insert a user record; None if the email is already registered."""
    if await get_user_by_email(session, data.email):
        return None
    user = User(email=data.email, name=data.name)
    session.add(user)
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        return None
    await session.refresh(user)
    return user


async def list_users(session: AsyncSession) -> list[User]:
    result = await session.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def promote_to_admin(session: AsyncSession, user_id: int) -> tuple[int, int]:
    """Set role=admin on the user. Returns (matched, modified)."""
    user = await session.get(User, user_id)
    if user is None:
        return 0, 0
    if user.role == ADMIN_ROLE:
        return 1, 0
    user.role = ADMIN_ROLE
    session.add(user)
    await session.flush()
    return 1, 1


def user_to_public(user: User) -> UserPublic:
    return UserPublic(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
    )
