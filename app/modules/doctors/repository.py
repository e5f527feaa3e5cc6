from app.core.repository import SoftDeleteRepository
from app.modules.doctors.models import Doctor

class DoctorRepository(SoftDeleteRepository[Doctor]):
    model = Doctor
    fields = ("name", "phone", "email")
