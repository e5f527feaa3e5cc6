import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.errors import not_found, unauthorized
from app.core.security import create_access_token, verify_password
from app.modules.users.repository import UserRepository
from app.modules.users.schemas import UserOut
from app.modules.auth.schemas import LoginIn, LoginOut

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, session: AsyncSession, settings: Settings):
        self.settings = settings
        self.users = UserRepository(session)

    async def login(self, payload: LoginIn) -> LoginOut:
        user = await self.users.get_by_username(payload.username)
        if user is None:
            logger.warning("Login failed: unknown username")
            raise not_found(f"User with username: {payload.username} not found")
        if not verify_password(payload.password, user.password_hash):
            logger.warning(f"Login failed: invalid password for user {user.id}")
            raise unauthorized("Invalid password")
        logger.info(f"User {user.id} logged in")
        return LoginOut(token=create_access_token(user.id, self.settings), user=UserOut.model_validate(user))
