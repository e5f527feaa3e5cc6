from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from app.core.validators import UtcDatetime


class CamelModel(BaseModel):
    """Base for wire schemas: snake_case attributes, camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RecordOut(CamelModel):
    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
