from datetime import datetime
from pydantic import Field, field_validator
from app.core.pagination import PageParams
from app.core.schemas import CamelModel, RecordOut
from app.core.validators import Text, UtcDatetime
from app.modules.doctors.schemas import DoctorOut
from app.modules.patients.schemas import PatientOut

class USGReportIn(CamelModel):
    patient_id: int = Field(alias="patient", ge=1)
    referrer_id: int = Field(alias="referrer", ge=1)
    part_of_scan: Text
    findings: Text
    date: UtcDatetime

    @field_validator("patient_id", "referrer_id", mode="before")
    @classmethod
    def _no_bool_ids(cls, v):
        if isinstance(v, bool):
            raise ValueError("must be an integer")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def _date_must_be_string(cls, v):
        # numbers would otherwise be read as unix timestamps
        if not isinstance(v, (str, datetime)):
            raise ValueError("must be an ISO-8601 date string")
        return v

class USGReportOut(RecordOut):
    patient: PatientOut
    referrer: DoctorOut
    part_of_scan: str
    findings: str
    date: UtcDatetime

class USGReportFilters(PageParams):
    patient: int | None = Field(default=None, ge=1)
    referrer: int | None = Field(default=None, ge=1)
    part_of_scan: str | None = None
    findings: str | None = None
    date_before: UtcDatetime | None = Field(default=None, alias="date_before")
    date_after: UtcDatetime | None = Field(default=None, alias="date_after")
