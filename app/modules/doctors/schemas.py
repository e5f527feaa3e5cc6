from pydantic import EmailStr
from app.core.pagination import PageParams
from app.core.schemas import CamelModel, RecordOut
from app.core.validators import Name, Phone

class DoctorIn(CamelModel):
    name: Name
    phone: Phone | None = None
    email: EmailStr | None = None

class DoctorOut(RecordOut):
    name: str
    phone: str | None
    email: str | None

class DoctorFilters(PageParams):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
