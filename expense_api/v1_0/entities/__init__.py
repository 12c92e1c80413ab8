from .category_DTO import CategoryDTO
from .expense_DTO import ExpenseDTO


__all__ = [
    "CategoryDTO",
    "ExpenseDTO",
]
