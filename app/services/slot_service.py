from collections.abc import Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking
from app.models.treatment import Treatment, TreatmentAvailability, TreatmentSlot, TreatmentSpecialty


async def create_treatment(
    session: AsyncSession, name: str, price: float, slots: Sequence[str]
) -> Treatment:
    """Store a treatment and its daily slot template, keeping the given order."""
    treatment = Treatment(name=name, price=price)
    session.add(treatment)
    await session.flush()
    for position, label in enumerate(slots):
        session.add(TreatmentSlot(treatment_id=treatment.id, position=position, label=label))
    await session.flush()
    await session.refresh(treatment)
    return treatment


async def list_specialties(session: AsyncSession) -> list[TreatmentSpecialty]:
    result = await session.execute(select(Treatment.id, Treatment.name).order_by(Treatment.id))
    return [TreatmentSpecialty(id=tid, name=name) for tid, name in result.all()]


async def get_booked_slots(session: AsyncSession, appointment_date: str) -> dict[str, set[str]]:
    """Slots already taken on the date, keyed by treatment name."""
    result = await session.execute(
        select(Booking.treatment, Booking.slot).where(Booking.appointment_date == appointment_date)
    )
    booked: dict[str, set[str]] = {}
    for treatment, slot in result.all():
        booked.setdefault(treatment, set()).add(slot)
    return booked


async def available_slots_in_memory(
    session: AsyncSession, appointment_date: str
) -> list[TreatmentAvailability]:
    """Fetch every template and the day's bookings, then subtract in Python."""
    treatments = (await session.execute(select(Treatment).order_by(Treatment.id))).scalars().all()
    template_rows = await session.execute(
        select(TreatmentSlot.treatment_id, TreatmentSlot.label).order_by(
            TreatmentSlot.treatment_id, TreatmentSlot.position
        )
    )
    templates: dict[int, list[str]] = {}
    for treatment_id, label in template_rows.all():
        templates.setdefault(treatment_id, []).append(label)
    booked = await get_booked_slots(session, appointment_date)

    out: list[TreatmentAvailability] = []
    for t in treatments:
        taken = booked.get(t.name, set())
        remaining = [s for s in templates.get(t.id, []) if s not in taken]
        out.append(TreatmentAvailability(id=t.id, name=t.name, price=t.price, slots=remaining))
    return out


async def available_slots_aggregated(
    session: AsyncSession, appointment_date: str
) -> list[TreatmentAvailability]:
    """Same result as available_slots_in_memory, with the subtraction done by the database.

    Treatments are outer-joined to their unbooked template slots so a fully
    booked treatment still comes back, as a single row with a NULL label.
    """
    slot_taken = (
        select(Booking.id)
        .where(
            Booking.treatment == Treatment.name,
            Booking.slot == TreatmentSlot.label,
            Booking.appointment_date == appointment_date,
        )
        .correlate(Treatment, TreatmentSlot)
        .exists()
    )
    stmt = (
        select(Treatment.id, Treatment.name, Treatment.price, TreatmentSlot.label)
        .select_from(Treatment)
        .outerjoin(
            TreatmentSlot,
            and_(TreatmentSlot.treatment_id == Treatment.id, ~slot_taken),
        )
        .order_by(Treatment.id, TreatmentSlot.position)
    )
    result = await session.execute(stmt)

    out: list[TreatmentAvailability] = []
    current: TreatmentAvailability | None = None
    for tid, name, price, label in result.all():
        if current is None or current.id != tid:
            current = TreatmentAvailability(id=tid, name=name, price=price, slots=[])
            out.append(current)
        if label is not None:
            current.slots.append(label)
    return out
