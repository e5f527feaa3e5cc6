import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import conflict, not_found
from app.core.security import hash_password
from app.modules.users.models import User
from app.modules.users.repository import UserRepository
from app.modules.users.schemas import UserCreate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = UserRepository(session)

    async def get(self, user_id: int) -> User:
        obj = await self.repo.get(user_id)
        if obj is None:
            raise not_found(f"User with id: {user_id} not found")
        return obj

    async def create_user(self, payload: UserCreate) -> User:
        if await self.repo.username_taken(payload.username):
            raise conflict(f"Username {payload.username} is already taken")
        try:
            obj = await self.repo.create(
                first_name=payload.first_name,
                last_name=payload.last_name,
                username=payload.username,
                password_hash=hash_password(payload.password),
            )
            await self.session.commit()
        except IntegrityError as exc:
            # lost a race with a concurrent insert of the same username
            await self.session.rollback()
            raise conflict(f"Username {payload.username} is already taken") from exc
        logger.info(f"Created User {obj.id}")
        return obj
