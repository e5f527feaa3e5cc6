from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.db import get_session
from app.core.security import get_settings
from app.modules.auth.schemas import LoginIn, LoginOut
from app.modules.auth.service import AuthService

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(session, settings)

@router.post("/login", response_model=LoginOut)
async def login(payload: LoginIn, service: AuthService = Depends(svc)):
    return await service.login(payload)
