from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.core.logger import logger
from expense_api.storage.database.db_connector import SessionDependency
from expense_api.v1_0.entities import ExpenseDTO
from expense_api.v1_0.services import ExpenseService


def build_expense_router(service: ExpenseService, get_db: SessionDependency) -> APIRouter:
    router = APIRouter(prefix="/expenses", tags=["Expenses"])

    @router.post(
        "",
        response_model=ExpenseDTO,
        status_code=status.HTTP_201_CREATED,
        summary="Create a new expense",
    )
    async def create_expense(
        request: ExpenseDTO,
        db: AsyncSession = Depends(get_db),
    ) -> ExpenseDTO:
        logger.info("[ExpenseRouter] create payload=%s", request.model_dump())
        return await service.create(request, db)

    @router.get(
        "/{expense_id}",
        response_model=ExpenseDTO,
        summary="Get expense by ID",
    )
    async def get_expense(
        expense_id: int,
        db: AsyncSession = Depends(get_db),
    ) -> ExpenseDTO:
        logger.debug("[ExpenseRouter] get id=%s", expense_id)
        return await service.get(expense_id, db)

    @router.get(
        "",
        response_model=List[ExpenseDTO],
        summary="List all expenses",
    )
    async def list_expenses(
        db: AsyncSession = Depends(get_db),
    ) -> List[ExpenseDTO]:
        logger.debug("[ExpenseRouter] list_all")
        return await service.list_all(db)

    @router.put(
        "/{expense_id}",
        response_model=ExpenseDTO,
        summary="Replace an expense",
    )
    async def update_expense(
        expense_id: int,
        request: ExpenseDTO,
        db: AsyncSession = Depends(get_db),
    ) -> ExpenseDTO:
        logger.info("[ExpenseRouter] update id=%s payload=%s", expense_id, request.model_dump())
        return await service.update(expense_id, request, db)

    @router.delete(
        "/{expense_id}",
        response_class=PlainTextResponse,
        summary="Delete an expense",
    )
    async def delete_expense(
        expense_id: int,
        db: AsyncSession = Depends(get_db),
    ) -> str:
        logger.warning("[ExpenseRouter] delete id=%s", expense_id)
        return await service.delete(expense_id, db)

    return router
