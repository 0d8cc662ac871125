from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.doctor import Doctor, DoctorCreate


async def list_doctors(session: AsyncSession) -> list[Doctor]:
    result = await session.execute(select(Doctor).order_by(Doctor.id))
    return list(result.scalars().all())


async def add_doctor(session: AsyncSession, data: DoctorCreate) -> Doctor:
    doctor = Doctor.model_validate(data)
    session.add(doctor)
    await session.flush()
    await session.refresh(doctor)
    return doctor


async def delete_doctor(session: AsyncSession, doctor_id: int) -> int:
    """Returns the number of rows deleted (0 or 1)."""
    result = await session.execute(delete(Doctor).where(Doctor.id == doctor_id))
    await session.flush()
    return result.rowcount or 0
