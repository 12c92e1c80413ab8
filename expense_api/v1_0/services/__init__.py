from .category_service import CategoryService
from .expense_service import ExpenseService
__all__=[
    "CategoryService",
    "ExpenseService",
    ]
