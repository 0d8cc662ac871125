from app.models.user import User, UserCreate, UserPublic
from app.models.treatment import Treatment, TreatmentAvailability, TreatmentSlot, TreatmentSpecialty
from app.models.booking import Booking, BookingCreate
from app.models.payment import Payment, PaymentCreate
from app.models.doctor import Doctor, DoctorCreate

__all__ = [
    "User",
    "UserCreate",
    "UserPublic",
    "Treatment",
    "TreatmentSlot",
    "TreatmentAvailability",
    "TreatmentSpecialty",
    "Booking",
    "BookingCreate",
    "Payment",
    "PaymentCreate",
    "Doctor",
    "DoctorCreate",
]
