from datetime import datetime

from pydantic import AliasChoices, Field

from app.api.schemas.common import CamelModel, Email


class BookingRequest(CamelModel):
    treatment: str
    appointment_date: str
    slot: str
    email: Email
    # Web client sends the patient's name as "patient"
    patient_name: str | None = Field(
        default=None, validation_alias=AliasChoices("patient", "patientName", "patient_name")
    )
    phone: str | None = None
    price: float | None = None


class BookingPublic(CamelModel):
    id: int
    treatment: str
    appointment_date: str
    slot: str
    email: str
    patient_name: str | None = None
    phone: str | None = None
    price: float | None = None
    created_at: datetime


class BookingConflictResponse(CamelModel):
    acknowledged: bool = False
    message: str
