from .category_router import build_category_router
from .expense_router import build_expense_router
__all__ = [
    "build_category_router",
    "build_expense_router",
]
