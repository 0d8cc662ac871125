from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Treatment(SQLModel, table=True):
    __tablename__ = "treatments"
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    price: float = 0


class TreatmentSlot(SQLModel, table=True):
    """One label of a treatment's daily slot template; `position` keeps template order."""

    __tablename__ = "treatment_slots"
    __table_args__ = (
        UniqueConstraint("treatment_id", "position", name="uq_treatment_slot_position"),
        UniqueConstraint("treatment_id", "label", name="uq_treatment_slot_label"),
    )
    id: int | None = Field(default=None, primary_key=True)
    treatment_id: int = Field(foreign_key="treatments.id", ondelete="CASCADE", index=True)
    position: int
    label: str


class TreatmentAvailability(SQLModel):
    id: int
    name: str
    price: float
    slots: list[str]


class TreatmentSpecialty(SQLModel):
    id: int
    name: str
