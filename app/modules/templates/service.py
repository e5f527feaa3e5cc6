from app.core.pagination import contains
from app.core.service import ResourceService
from app.modules.templates.models import Template
from app.modules.templates.repository import TemplateRepository
from app.modules.templates.schemas import TemplateFilters, TemplateOut

class TemplateService(ResourceService[TemplateRepository, TemplateFilters]):
    resource_name = "Template"
    repository_class = TemplateRepository
    out_schema = TemplateOut

    def filter_conditions(self, filters: TemplateFilters):
        return (contains(Template.name, filters.name),)
