from pydantic import Field
from app.core.schemas import CamelModel, RecordOut

class UserCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)

class UserOut(RecordOut):
    first_name: str
    last_name: str | None
    username: str
