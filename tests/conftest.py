"""Shared fixtures: a temporary SQLite file per test, seeded synchronously and
served through the async app or an async session."""

import os
from pathlib import Path
from typing import AsyncGenerator, Generator

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./doctors_portal_test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import Session, SQLModel, create_engine

from app.core.db import Database
from app.core.security import create_access_token
from app.models import Booking, Treatment, TreatmentSlot, User


class Seeder:
    """Writes fixtures straight into the test database."""

    def __init__(self, engine) -> None:
        self.engine = engine

    def treatment(self, name: str, slots: list[str], price: float = 99) -> int:
        with Session(self.engine) as session:
            treatment = Treatment(name=name, price=price)
            session.add(treatment)
            session.flush()
            for position, label in enumerate(slots):
                session.add(TreatmentSlot(treatment_id=treatment.id, position=position, label=label))
            session.commit()
            return treatment.id

    def booking(self, treatment: str, appointment_date: str, slot: str, email: str, **extra) -> int:
        with Session(self.engine) as session:
            booking = Booking(
                treatment=treatment,
                appointment_date=appointment_date,
                slot=slot,
                email=email,
                **extra,
            )
            session.add(booking)
            session.commit()
            return booking.id

    def user(self, email: str, role: str | None = None, name: str | None = None) -> int:
        with Session(self.engine) as session:
            user = User(email=email, role=role, name=name)
            session.add(user)
            session.commit()
            return user.id

    def get_user(self, user_id: int) -> User | None:
        with Session(self.engine) as session:
            return session.get(User, user_id)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
def seed(db_path: Path) -> Generator[Seeder, None, None]:
    engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(engine)
    yield Seeder(engine)
    engine.dispose()


@pytest.fixture
def client(db_path: Path, seed: Seeder) -> Generator[TestClient, None, None]:
    """Test client on the seeded database."""
    from app.main import create_app

    app = create_app(database=Database(f"sqlite+aiosqlite:///{db_path}"))
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def session(db_path: Path) -> AsyncGenerator[AsyncSession, None]:
    database = Database(f"sqlite+aiosqlite:///{db_path}")
    await database.create_all()
    async with database.session_maker() as s:
        yield s
    await database.dispose()


@pytest.fixture
def auth_header():
    """Build an Authorization header carrying a valid token for the email."""

    def _header(email: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(email)}"}

    return _header
