from dependency_injector import containers, providers
from expense_api.v1_0.repositories import (
    CategoryRepository,
    ExpenseRepository,
    )
from expense_api.v1_0.services import (
    CategoryService,
    ExpenseService,
    )

class APIContainer(containers.DeclarativeContainer):
    category_repository = providers.Singleton(CategoryRepository)
    expense_repository = providers.Singleton(ExpenseRepository)

    category_service = providers.Singleton(
        CategoryService,
        category_repository = category_repository,
        expense_repository = expense_repository
    )
    expense_service = providers.Singleton(
        ExpenseService,
        expense_repository = expense_repository,
        category_repository = category_repository
    )
