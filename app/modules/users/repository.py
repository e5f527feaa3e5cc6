from sqlalchemy import select
from app.core.repository import SoftDeleteRepository
from app.modules.users.models import User

class UserRepository(SoftDeleteRepository[User]):
    model = User
    fields = ("first_name", "last_name", "username", "password_hash")

    async def get_by_username(self, username: str) -> User | None:
        q = select(User).where(User.username == username, User.deleted.is_(False))
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def username_taken(self, username: str) -> bool:
        # soft-deleted users still hold their username
        q = select(User.id).where(User.username == username)
        res = await self.session.execute(q)
        return res.first() is not None
