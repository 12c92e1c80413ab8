from expense_api.v1_0.entities import ExpenseDTO
from expense_api.v1_0.models import Category, Expense
from .category_mapper import category_to_dto

def expense_to_dto(expense: Expense) -> ExpenseDTO:
    return ExpenseDTO(
        id=expense.id,
        amount=expense.amount,
        expense_date=expense.expense_date,
        category_dto=category_to_dto(expense.category),
    )

def dto_to_expense(dto: ExpenseDTO, category: Category) -> Expense:
    """
    Build an unsaved expense bound to an already resolved category.

    Whatever the client sent in ``categoryDto`` besides the id is not used.
    """
    return Expense(
        amount=dto.amount,
        expense_date=dto.expense_date,
        category_id=category.id,
        category=category,
    )
