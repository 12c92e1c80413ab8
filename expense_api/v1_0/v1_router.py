from fastapi import APIRouter

from expense_api.storage.database.db_connector import SessionDependency
from expense_api.v1_0.routers import build_category_router, build_expense_router
from expense_api.v1_0.services import CategoryService, ExpenseService


def build_v1_router(
    category_service: CategoryService,
    expense_service: ExpenseService,
    get_db: SessionDependency,
) -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(build_category_router(category_service, get_db))
    v1_router.include_router(build_expense_router(expense_service, get_db))
    return v1_router
