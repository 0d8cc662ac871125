from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.models.treatment import TreatmentAvailability, TreatmentSpecialty
from app.services.slot_service import (
    available_slots_aggregated,
    available_slots_in_memory,
    list_specialties,
)

router = APIRouter(tags=["appointment options"])


@router.get("/appointmentOptions", response_model=list[TreatmentAvailability])
async def appointment_options(
    date: str = Query(...),
    session: AsyncSession = Depends(get_session),
) -> list[TreatmentAvailability]:
    """Every treatment with the slots still free on `date`, in template order."""
    return await available_slots_in_memory(session, date)


@router.get("/v2/appointmentOptions", response_model=list[TreatmentAvailability])
async def appointment_options_v2(
    date: str = Query(...),
    session: AsyncSession = Depends(get_session),
) -> list[TreatmentAvailability]:
    """Same as /appointmentOptions, computed with a single database query."""
    return await available_slots_aggregated(session, date)


@router.get("/appointmentSpecialty", response_model=list[TreatmentSpecialty])
async def appointment_specialty(
    session: AsyncSession = Depends(get_session),
) -> list[TreatmentSpecialty]:
    return await list_specialties(session)
