from sqlalchemy import select, exists
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.v1_0.models import Expense
from .base_repository import BaseRepository

class ExpenseRepository(BaseRepository[Expense]):
    def __init__(self) -> None:
        super().__init__(Expense)

    async def exists_for_category(
        self,
        category_id: int,
        session: AsyncSession
    ) -> bool:
        """
        True if at least one expense still references the category.
        """
        stmt = select(exists().where(Expense.category_id == category_id))
        return bool(await session.scalar(stmt))
