from sqlmodel import Field, SQLModel


class DoctorBase(SQLModel):
    name: str
    email: str = Field(index=True)
    specialty: str
    image: str | None = None


class Doctor(DoctorBase, table=True):
    __tablename__ = "doctors"
    id: int | None = Field(default=None, primary_key=True)


class DoctorCreate(DoctorBase):
    pass
