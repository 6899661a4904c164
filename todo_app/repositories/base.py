from __future__ import annotations
from typing import Any, Generic, Sequence, TypeVar
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.inspection import inspect as sa_inspect

T = TypeVar("T")  # SQLAlchemy model class (Declarative)

class BaseRepository(Generic[T]):
    """
    Shared async repository for one declarative model.
    - Only accepts model instances (no dicts / pydantic objects).
    - Never commits: commit/rollback belongs to the calling service.
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get_by(self, session: AsyncSession, **filters: Any) -> T | None:
        stmt = select(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return res.scalars().one_or_none()

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        """Row count, equality filters only."""
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = stmt.filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one())

    async def list(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any] | None = None,
        order_by: Sequence[InstrumentedAttribute] | None = None,
    ) -> list[T]:
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        Insert a new row.
        - obj must be transient (never added to a session, no PK yet)
        - add -> flush, so the generated PK is populated on return
        """
        state = sa_inspect(obj)
        if not state.transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        session.add(obj)
        await session.flush()
        return obj
