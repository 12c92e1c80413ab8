from .base_repository import BaseRepository
from .category_repository import CategoryRepository
from .expense_repository import ExpenseRepository
__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "ExpenseRepository",
]
