from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.api.schemas.common import DeleteResult, InsertResult
from app.core.db import get_session
from app.models.doctor import Doctor, DoctorCreate
from app.services.doctor_service import add_doctor, delete_doctor, list_doctors

# Every roster operation is admin-only
router = APIRouter(prefix="/doctors", tags=["doctors"], dependencies=[Depends(require_admin)])


@router.get("", response_model=list[Doctor])
async def roster(session: AsyncSession = Depends(get_session)) -> list[Doctor]:
    return await list_doctors(session)


@router.post("", response_model=InsertResult)
async def create_doctor(
    body: DoctorCreate,
    session: AsyncSession = Depends(get_session),
) -> InsertResult:
    doctor = await add_doctor(session, body)
    return InsertResult(inserted_id=doctor.id)


@router.delete("/{doctor_id}", response_model=DeleteResult)
async def remove_doctor(
    doctor_id: int,
    session: AsyncSession = Depends(get_session),
) -> DeleteResult:
    return DeleteResult(deleted_count=await delete_doctor(session, doctor_id))
