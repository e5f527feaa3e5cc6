from pydantic import EmailStr, Field
from app.core.pagination import PageParams
from app.core.schemas import CamelModel, RecordOut
from app.core.validators import Name, Phone
from app.modules.patients.models import Gender

class PatientIn(CamelModel):
    name: Name
    phone: Phone | None = None
    email: EmailStr | None = None
    age: int | None = Field(default=None, ge=0, le=120)
    gender: Gender

class PatientOut(RecordOut):
    name: str
    phone: str | None
    email: str | None
    age: int | None
    gender: Gender

class PatientFilters(PageParams):
    name: str | None = None
    phone: str | None = None
    gender: Gender | None = None
