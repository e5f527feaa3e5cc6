from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String
from app.core.base import Base, TimestampedSoftDeleteMixin

class Doctor(Base, TimestampedSoftDeleteMixin):
    name: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(16), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
