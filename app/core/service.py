import logging
from typing import Any, Generic, Sequence, TypeVar
from pydantic import BaseModel
from sqlalchemy import ColumnElement
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import ApiError, not_found
from app.core.pagination import Page, PageParams
from app.core.repository import SoftDeleteRepository
from app.core.schemas import CamelModel

logger = logging.getLogger(__name__)

RepoT = TypeVar("RepoT", bound=SoftDeleteRepository)
FilterT = TypeVar("FilterT", bound=PageParams)


class ResourceService(Generic[RepoT, FilterT]):
    """Lifecycle of one soft-deletable resource: create, get, update, delete, list.

    Each operation commits on success and rolls back on a store error; a missing
    or soft-deleted row is reported as not found.
    """
    resource_name: str = "Resource"
    repository_class: type[SoftDeleteRepository]
    out_schema: type[CamelModel]

    def __init__(self, session: AsyncSession, *, default_page_size: int = 10, max_page_size: int = 100):
        self.session = session
        self.repo: RepoT = self.repository_class(session)
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def filter_conditions(self, filters: FilterT) -> Sequence[ColumnElement[bool] | None]:
        return ()

    def integrity_error(self, exc: IntegrityError) -> ApiError | None:
        """Map a store constraint failure to a client error; None re-raises it."""
        return None

    def not_found(self, obj_id: int) -> ApiError:
        return not_found(f"{self.resource_name} with id: {obj_id} not found")

    async def _write(self, coro):
        try:
            obj = await coro
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            mapped = self.integrity_error(exc)
            if mapped is None:
                raise
            logger.warning(f"{self.resource_name} write rejected: {mapped.message}")
            raise mapped from exc
        return obj

    async def create(self, payload: BaseModel) -> Any:
        obj = await self._write(self.repo.create(**payload.model_dump()))
        logger.info(f"Created {self.resource_name} {obj.id}")
        return obj

    async def get(self, obj_id: int) -> Any:
        obj = await self.repo.get(obj_id)
        if obj is None:
            raise self.not_found(obj_id)
        return obj

    async def update(self, obj_id: int, payload: BaseModel) -> Any:
        obj = await self.get(obj_id)
        obj = await self._write(self.repo.replace(obj, **payload.model_dump()))
        logger.info(f"Updated {self.resource_name} {obj.id}")
        return obj

    async def delete(self, obj_id: int) -> Any:
        obj = await self.get(obj_id)
        obj = await self._write(self.repo.soft_delete(obj))
        logger.info(f"Deleted {self.resource_name} {obj.id}")
        return obj

    async def list(self, filters: FilterT) -> Page:
        limit = filters.resolve_limit(self.default_page_size, self.max_page_size)
        return await self.repo.list_page(
            conditions=self.filter_conditions(filters),
            page=filters.page,
            limit=limit,
            schema=self.out_schema,
        )
