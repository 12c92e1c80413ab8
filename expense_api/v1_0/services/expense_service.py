from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.core.exceptions import ResourceNotFoundError, ValidationFailedError
from expense_api.core.logger import logger
from expense_api.utils.tx import maybe_begin
from expense_api.v1_0.entities import ExpenseDTO
from expense_api.v1_0.mappers import dto_to_expense, expense_to_dto
from expense_api.v1_0.models import Category, Expense
from expense_api.v1_0.repositories import CategoryRepository, ExpenseRepository
from expense_api.v1_0.validators import validate_expense


class ExpenseService:
    def __init__(
        self,
        expense_repository: ExpenseRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self.expense_repo = expense_repository
        self.category_repo = category_repository

    async def _require(
        self,
        expense_id: int,
        db: AsyncSession,
    ) -> Expense:
        """
        Ensure an expense exists or raise.

        Args:
            expense_id: Identifier of the expense to fetch.
            db: Active async database session.

        Returns:
            ORM expense entity with its category loaded.

        Raises:
            ResourceNotFoundError: If the expense does not exist.
        """
        e = await self.expense_repo.get_by_id(expense_id, session=db)
        if not e:
            raise ResourceNotFoundError("Expense", "id", expense_id)
        return e

    async def _resolve_category(
        self,
        dto: ExpenseDTO,
        db: AsyncSession,
    ) -> Category:
        category_id = dto.category_dto.id
        cat = await self.category_repo.get_by_id(category_id, session=db)
        if not cat:
            raise ResourceNotFoundError("Category", "id", category_id)
        return cat

    @staticmethod
    def _check(dto: ExpenseDTO) -> None:
        result = validate_expense(dto)
        if not result.ok:
            raise ValidationFailedError(result.errors)

    async def create(
        self,
        dto: ExpenseDTO,
        db: AsyncSession,
    ) -> ExpenseDTO:
        """
        Create a new expense bound to an existing category.

        Operations:
        - Validate required fields.
        - Resolve ``categoryDto.id`` to a stored category.
        - Persist the expense in the same transaction.

        Args:
            dto: Incoming expense; nested category fields other than id are ignored.
            db: Active async database session.

        Returns:
            ExpenseDTO with the resolved category embedded.

        Raises:
            ValidationFailedError: missing amount, date or category id.
            ResourceNotFoundError: the referenced category does not exist;
                nothing is written.
        """
        self._check(dto)
        logger.info(
            "[ExpenseService] Creating expense: %s",
            dto.model_dump(),
        )

        try:
            async with maybe_begin(db):
                cat = await self._resolve_category(dto, db)
                exp = await self.expense_repo.add(dto_to_expense(dto, cat), db)
        except IntegrityError as e:
            # category removed between lookup and insert
            raise ResourceNotFoundError("Category", "id", dto.category_dto.id) from e

        logger.info(
            "[ExpenseService] Expense created ID=%s",
            exp.id,
        )
        return expense_to_dto(exp)

    async def get(
        self,
        expense_id: int,
        db: AsyncSession,
    ) -> ExpenseDTO:
        logger.debug("[ExpenseService] Get ID=%s", expense_id)
        async with maybe_begin(db):
            exp = await self._require(expense_id, db)
        return expense_to_dto(exp)

    async def list_all(
        self,
        db: AsyncSession,
    ) -> List[ExpenseDTO]:
        logger.debug("[ExpenseService] List all")
        async with maybe_begin(db):
            rows = await self.expense_repo.list_all(db)
        return [expense_to_dto(e) for e in rows]

    async def update(
        self,
        expense_id: int,
        dto: ExpenseDTO,
        db: AsyncSession,
    ) -> ExpenseDTO:
        """
        Overwrite amount, date and category of an existing expense.

        Raises:
            ValidationFailedError: missing amount, date or category id.
            ResourceNotFoundError: unknown expense or category; nothing is written.
        """
        self._check(dto)
        logger.info(
            "[ExpenseService] Updating expense ID=%s: %s",
            expense_id,
            dto.model_dump(),
        )

        try:
            async with maybe_begin(db):
                exp = await self._require(expense_id, db)
                cat = await self._resolve_category(dto, db)
                exp.amount = dto.amount
                exp.expense_date = dto.expense_date
                exp.category_id = cat.id
                exp.category = cat
                await self.expense_repo.update(exp, db)
        except IntegrityError as e:
            raise ResourceNotFoundError("Category", "id", dto.category_dto.id) from e

        return expense_to_dto(exp)

    async def delete(
        self,
        expense_id: int,
        db: AsyncSession,
    ) -> str:
        logger.warning("[ExpenseService] Delete ID=%s", expense_id)
        async with maybe_begin(db):
            deleted = await self.expense_repo.delete_by_id(expense_id, db)
        if not deleted:
            raise ResourceNotFoundError("Expense", "id", expense_id)
        return f"Expense with ID {expense_id} deleted successfully"
