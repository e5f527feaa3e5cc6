from pydantic import BaseModel, Field
from app.modules.users.schemas import UserOut

class LoginIn(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class LoginOut(BaseModel):
    token: str
    user: UserOut
