import enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Enum, Integer, String
from app.core.base import Base, TimestampedSoftDeleteMixin

class Gender(str, enum.Enum):
    male = "male"
    female = "female"

class Patient(Base, TimestampedSoftDeleteMixin):
    name: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(16), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[Gender] = mapped_column(Enum(Gender, name="gender", native_enum=False, length=8))
