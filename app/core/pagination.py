"""Filtering and offset pagination over live (not soft-deleted) rows.

Listings are ordered by ``(created_at desc, id desc)`` so that pages are stable
even when several rows share a creation timestamp.  The page of rows and the
total count are two separate statements; a write landing between them can make
``total`` disagree with ``data`` for that one response.
"""
import math
from datetime import datetime
from typing import Annotated, Any, Generic, Sequence, TypeVar

from fastapi import Query, Request
from pydantic import ConfigDict, Field
from sqlalchemy import ColumnElement, Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import validation_error
from app.core.schemas import CamelModel

T = TypeVar("T")


class Page(CamelModel, Generic[T]):
    data: list[T]
    has_more: bool
    page: int
    limit: int
    total: int
    total_pages: int


class PageParams(CamelModel):
    """Query parameters shared by every list endpoint; unknown keys are rejected."""
    model_config = ConfigDict(extra="forbid")

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)

    def resolve_limit(self, default: int, maximum: int) -> int:
        limit = self.limit if self.limit is not None else default
        if limit > maximum:
            raise validation_error(f"limit: must be less than or equal to {maximum}")
        return limit


def query_filters(model: type[PageParams]):
    """Dependency that parses a list endpoint's query string into ``model``.

    Only the wire names (aliases) are accepted as keys; the snake_case attribute
    names are rejected like any other unknown key.
    """
    allowed = {field.alias or name for name, field in model.model_fields.items()}

    def dependency(request: Request, filters: Annotated[model, Query()]):
        unknown = sorted(set(request.query_params) - allowed)
        if unknown:
            raise validation_error(f"Unknown query parameter(s): {', '.join(unknown)}")
        return filters

    return dependency


def equals(column, value: Any) -> ColumnElement[bool] | None:
    if value is None:
        return None
    return column == value


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains(column, value: str | None) -> ColumnElement[bool] | None:
    if value is None or value == "":
        return None
    return column.ilike(f"%{_escape_like(value)}%", escape="\\")


def date_range(column, after: datetime | None = None, before: datetime | None = None) -> list[ColumnElement[bool]]:
    conditions = []
    if after is not None:
        conditions.append(column >= after)
    if before is not None:
        conditions.append(column <= before)
    return conditions


def live_predicate(model, conditions: Sequence[ColumnElement[bool] | None] = ()) -> ColumnElement[bool]:
    clauses = [model.deleted.is_(False)]
    clauses.extend(c for c in conditions if c is not None)
    return and_(*clauses)


async def paginate(
    session: AsyncSession,
    model,
    *,
    conditions: Sequence[ColumnElement[bool] | None] = (),
    page: int = 1,
    limit: int,
    schema: type[CamelModel],
    stmt: Select | None = None,
) -> Page:
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")

    predicate = live_predicate(model, conditions)
    base = stmt if stmt is not None else select(model)
    q = (
        base.where(predicate)
        .order_by(model.created_at.desc(), model.id.desc())
        .offset((page - 1) * limit)
        .limit(limit + 1)
    )
    rows = list((await session.execute(q)).scalars().all())

    total = (await session.execute(select(func.count()).select_from(model).where(predicate))).scalar_one()

    has_more = False
    if len(rows) > limit:
        rows.pop()
        has_more = True

    return Page[schema](
        data=[schema.model_validate(r) for r in rows],
        has_more=has_more,
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )
