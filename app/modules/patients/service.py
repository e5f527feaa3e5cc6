from app.core.pagination import contains, equals
from app.core.service import ResourceService
from app.modules.patients.models import Patient
from app.modules.patients.repository import PatientRepository
from app.modules.patients.schemas import PatientFilters, PatientOut

class PatientService(ResourceService[PatientRepository, PatientFilters]):
    resource_name = "Patient"
    repository_class = PatientRepository
    out_schema = PatientOut

    def filter_conditions(self, filters: PatientFilters):
        return (
            contains(Patient.name, filters.name),
            equals(Patient.phone, filters.phone),
            equals(Patient.gender, filters.gender),
        )
