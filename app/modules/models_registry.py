# Importing the model modules registers their tables on Base.metadata.
from app.modules.doctors.models import Doctor  # noqa: F401
from app.modules.patients.models import Patient  # noqa: F401
from app.modules.templates.models import Template  # noqa: F401
from app.modules.usg_reports.models import USGReport  # noqa: F401
from app.modules.users.models import User  # noqa: F401
