from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.core.logger import logger
from expense_api.storage.database.db_connector import SessionDependency
from expense_api.v1_0.entities import CategoryDTO
from expense_api.v1_0.services import CategoryService


def build_category_router(service: CategoryService, get_db: SessionDependency) -> APIRouter:
    router = APIRouter(prefix="/categories", tags=["Categories"])

    @router.post(
        "",
        response_model=CategoryDTO,
        status_code=status.HTTP_201_CREATED,
        summary="Create a new category",
    )
    async def create_category(
        request: CategoryDTO,
        db: AsyncSession = Depends(get_db),
    ) -> CategoryDTO:
        logger.info("[CategoryRouter] create payload=%s", request.model_dump())
        return await service.create(request, db)

    @router.get(
        "/{category_id}",
        response_model=CategoryDTO,
        summary="Get category by ID",
    )
    async def get_category(
        category_id: int,
        db: AsyncSession = Depends(get_db),
    ) -> CategoryDTO:
        logger.debug("[CategoryRouter] get id=%s", category_id)
        return await service.get(category_id, db)

    @router.get(
        "",
        response_model=List[CategoryDTO],
        summary="List all categories",
    )
    async def list_categories(
        db: AsyncSession = Depends(get_db),
    ) -> List[CategoryDTO]:
        logger.debug("[CategoryRouter] list_all")
        return await service.list_all(db)

    @router.put(
        "/{category_id}",
        response_model=CategoryDTO,
        summary="Rename a category",
    )
    async def update_category(
        category_id: int,
        request: CategoryDTO,
        db: AsyncSession = Depends(get_db),
    ) -> CategoryDTO:
        logger.info("[CategoryRouter] update id=%s payload=%s", category_id, request.model_dump())
        return await service.update(category_id, request, db)

    @router.delete(
        "/{category_id}",
        response_class=PlainTextResponse,
        summary="Delete a category",
    )
    async def delete_category(
        category_id: int,
        db: AsyncSession = Depends(get_db),
    ) -> str:
        logger.warning("[CategoryRouter] delete id=%s", category_id)
        return await service.delete(category_id, db)

    return router
