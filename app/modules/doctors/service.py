from app.core.pagination import contains, equals
from app.core.service import ResourceService
from app.modules.doctors.models import Doctor
from app.modules.doctors.repository import DoctorRepository
from app.modules.doctors.schemas import DoctorFilters, DoctorOut

class DoctorService(ResourceService[DoctorRepository, DoctorFilters]):
    resource_name = "Doctor"
    repository_class = DoctorRepository
    out_schema = DoctorOut

    def filter_conditions(self, filters: DoctorFilters):
        return (
            contains(Doctor.name, filters.name),
            equals(Doctor.phone, filters.phone),
            contains(Doctor.email, filters.email),
        )
