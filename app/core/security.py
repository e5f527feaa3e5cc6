from datetime import datetime, timedelta, timezone
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel
from app.core.config import Settings
from app.core.errors import unauthorized

http_bearer = HTTPBearer(auto_error=False)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

class Principal(BaseModel):
    user_id: int

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # malformed stored hash
        return False

def create_access_token(user_id: int, settings: Settings) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload = {"id": user_id, "exp": expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)

def decode_token(token: str, settings: Settings) -> dict:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except JWTError as e:
        raise unauthorized(f"Invalid token: {e}")

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

async def ensure_logged_in(
    creds: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    settings: Settings = Depends(get_settings),
) -> Principal:
    # Only the token's integrity and expiry are checked; the user row is not re-read.
    if creds is None or creds.scheme.lower() != "bearer":
        raise unauthorized("Missing token")
    data = decode_token(creds.credentials, settings)
    user_id = data.get("id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise unauthorized("Invalid token: missing subject")
    return Principal(user_id=user_id)
