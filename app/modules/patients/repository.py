from app.core.repository import SoftDeleteRepository
from app.modules.patients.models import Patient

class PatientRepository(SoftDeleteRepository[Patient]):
    model = Patient
    fields = ("name", "phone", "email", "age", "gender")
