from typing import Any, Optional, Type, TypeVar, Generic, Protocol, runtime_checkable
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

# --- models must expose .id ---
@runtime_checkable
class HasId(Protocol):
    id: Any  # PK column

ModelT = TypeVar("ModelT", bound=HasId)

# Integer PKs are INT4 on PostgreSQL; anything outside can never match a row.
PK_MIN = -(2**31)
PK_MAX = 2**31 - 1


def pk_in_range(id_: Any) -> bool:
    return not isinstance(id_, int) or PK_MIN <= id_ <= PK_MAX


class BaseRepository(Generic[ModelT]):
    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def add(self, entity: ModelT, session: AsyncSession) -> ModelT:
        session.add(entity)
        await session.flush()
        return entity

    async def get_by_id(self, id_: Any, session: AsyncSession) -> Optional[ModelT]:
        if not pk_in_range(id_):
            return None
        stmt: Select = select(self.model).where(self.model.id == id_)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def list_all(self, session: AsyncSession) -> list[ModelT]:
        stmt: Select = select(self.model).order_by(self.model.id.asc())
        res = await session.execute(stmt)
        return list(res.scalars().all())

    async def update(self, entity: ModelT, session: AsyncSession) -> ModelT:
        await session.flush()
        return entity

    async def delete(self, entity: ModelT, session: AsyncSession) -> None:
        await session.delete(entity)
        await session.flush()

    async def delete_by_id(self, id_: Any, session: AsyncSession) -> int:
        obj = await self.get_by_id(id_, session)
        if not obj:
            return 0
        await session.delete(obj)
        await session.flush()
        return 1
