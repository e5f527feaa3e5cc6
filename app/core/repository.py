from typing import Any, Generic, Sequence, TypeVar
from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.base import Base, utcnow
from app.core.pagination import Page, paginate
from app.core.schemas import CamelModel

ModelT = TypeVar("ModelT", bound=Base)

class SoftDeleteRepository(Generic[ModelT]):
    """Create/read/replace/soft-delete over one table.

    Every read goes through the live filter (``deleted`` is false); rows are never
    physically removed.
    """
    model: type[ModelT]
    # resource-specific columns written by create/replace
    fields: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **data: Any) -> ModelT:
        obj = self.model(**{k: data.get(k) for k in self.fields if k in data})
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def get(self, obj_id: int) -> ModelT | None:
        q = select(self.model).where(
            self.model.id == obj_id,
            self.model.deleted.is_(False),
        )
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def list_page(
        self,
        *,
        conditions: Sequence[ColumnElement[bool] | None] = (),
        page: int,
        limit: int,
        schema: type[CamelModel],
    ) -> Page:
        return await paginate(self.session, self.model, conditions=conditions, page=page, limit=limit, schema=schema)

    async def replace(self, obj: ModelT, **data: Any) -> ModelT:
        # full replace: fields missing from data are cleared
        for k in self.fields:
            setattr(obj, k, data.get(k))
        # set explicitly: an identical payload leaves nothing dirty for onupdate
        obj.updated_at = utcnow()
        await self.session.flush()
        return obj

    async def soft_delete(self, obj: ModelT) -> ModelT:
        obj.deleted = True
        obj.updated_at = utcnow()
        await self.session.flush()
        return obj
