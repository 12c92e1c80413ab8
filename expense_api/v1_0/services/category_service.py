from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.core.exceptions import ConflictError, ResourceNotFoundError, ValidationFailedError
from expense_api.core.logger import logger
from expense_api.utils.tx import maybe_begin
from expense_api.v1_0.entities import CategoryDTO
from expense_api.v1_0.mappers import category_to_dto, dto_to_category
from expense_api.v1_0.models import Category
from expense_api.v1_0.repositories import CategoryRepository, ExpenseRepository
from expense_api.v1_0.validators import validate_category


class CategoryService:
    """CRUD operations for categories."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        expense_repository: ExpenseRepository,
    ) -> None:
        self.repo = category_repository
        self.expense_repo = expense_repository

    async def _require(self, category_id: int, db: AsyncSession) -> Category:
        """Fetch category or raise.

        Args:
            category_id: Category ID.
            db: Active async DB session.

        Returns:
            ORM category row.

        Raises:
            ResourceNotFoundError: if no row has that id.
        """
        cat = await self.repo.get_by_id(category_id, db)
        if not cat:
            raise ResourceNotFoundError("Category", "id", category_id)
        return cat

    @staticmethod
    def _check(dto: CategoryDTO) -> None:
        result = validate_category(dto)
        if not result.ok:
            raise ValidationFailedError(result.errors)

    async def create(self, dto: CategoryDTO, db: AsyncSession) -> CategoryDTO:
        """Create a new category.

        Raises:
            ValidationFailedError: name missing or blank.
            ConflictError: name already taken.
        """
        self._check(dto)
        logger.info("[CategoryService] Creating category: %s", dto.name)
        try:
            async with maybe_begin(db):
                c = await self.repo.add(dto_to_category(dto), db)
        except IntegrityError as e:
            raise ConflictError(f"Category with name '{dto.name}' already exists") from e
        logger.info("[CategoryService] Created ID=%s", c.id)
        return category_to_dto(c)

    async def get(self, category_id: int, db: AsyncSession) -> CategoryDTO:
        logger.debug("[CategoryService] Get ID=%s", category_id)
        async with maybe_begin(db):
            c = await self._require(category_id, db)
        return category_to_dto(c)

    async def list_all(self, db: AsyncSession) -> List[CategoryDTO]:
        logger.debug("[CategoryService] List all")
        async with maybe_begin(db):
            rows = await self.repo.list_all(db)
        return [category_to_dto(c) for c in rows]

    async def update(self, category_id: int, dto: CategoryDTO, db: AsyncSession) -> CategoryDTO:
        """Overwrite the name of an existing category.

        Args:
            category_id: Category ID taken from the path; ``dto.id`` is ignored.
            dto: New category data.
            db: Active async DB session.

        Returns:
            Updated CategoryDTO.

        Raises:
            ValidationFailedError: name missing or blank.
            ResourceNotFoundError: unknown id.
            ConflictError: name taken by another category.
        """
        self._check(dto)
        logger.info("[CategoryService] Updating ID=%s name=%s", category_id, dto.name)
        try:
            async with maybe_begin(db):
                c = await self._require(category_id, db)
                c.name = dto.name
                await self.repo.update(c, db)
        except IntegrityError as e:
            raise ConflictError(f"Category with name '{dto.name}' already exists") from e
        return category_to_dto(c)

    async def delete(self, category_id: int, db: AsyncSession) -> str:
        """Delete a category by ID.

        Returns:
            Confirmation message.

        Raises:
            ResourceNotFoundError: unknown id.
            ConflictError: expenses still reference the category.
        """
        logger.warning("[CategoryService] Delete ID=%s", category_id)
        try:
            async with maybe_begin(db):
                c = await self._require(category_id, db)
                if await self.expense_repo.exists_for_category(category_id, db):
                    raise ConflictError(
                        f"Category with ID {category_id} is still referenced by expenses"
                    )
                await self.repo.delete(c, db)
        except IntegrityError as e:
            raise ConflictError(
                f"Category with ID {category_id} is still referenced by expenses"
            ) from e
        return f"Category with ID {category_id} deleted successfully"
