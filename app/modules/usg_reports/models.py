from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, Text, TIMESTAMP
from app.core.base import Base, TimestampedSoftDeleteMixin
from app.modules.doctors.models import Doctor
from app.modules.patients.models import Patient

class USGReport(Base, TimestampedSoftDeleteMixin):
    patient_id: Mapped[int] = mapped_column(ForeignKey("patient.id"), index=True)
    referrer_id: Mapped[int] = mapped_column(ForeignKey("doctor.id"), index=True)
    part_of_scan: Mapped[str] = mapped_column(Text)
    findings: Mapped[str] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), index=True)

    # referenced rows are embedded in every response, including soft-deleted ones
    patient: Mapped[Patient] = relationship(lazy="selectin")
    referrer: Mapped[Doctor] = relationship(lazy="selectin")
