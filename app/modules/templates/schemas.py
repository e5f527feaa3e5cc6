from app.core.pagination import PageParams
from app.core.schemas import CamelModel, RecordOut
from app.core.validators import Name, Text

class TemplateIn(CamelModel):
    name: Name
    content: Text

class TemplateOut(RecordOut):
    name: str
    content: str

class TemplateFilters(PageParams):
    name: str | None = None
