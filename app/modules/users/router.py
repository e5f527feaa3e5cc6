from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.db import get_session
from app.core.security import ensure_logged_in
from app.modules.users.schemas import UserOut
from app.modules.users.service import UserService

router = APIRouter(dependencies=[Depends(ensure_logged_in)])

def svc(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(session)

@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, service: UserService = Depends(svc)):
    return await service.get(user_id)
