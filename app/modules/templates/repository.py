from app.core.repository import SoftDeleteRepository
from app.modules.templates.models import Template

class TemplateRepository(SoftDeleteRepository[Template]):
    model = Template
    fields = ("name", "content")
