from datetime import date
from decimal import Decimal

from expense_api.v1_0.entities import CategoryDTO, ExpenseDTO
from expense_api.v1_0.mappers import (
    category_to_dto,
    dto_to_category,
    dto_to_expense,
    expense_to_dto,
)
from expense_api.v1_0.models import Category, Expense


def test_category_round_trip_fields():
    entity = Category(id=3, name="Rent")

    assert category_to_dto(entity) == CategoryDTO(id=3, name="Rent")


def test_dto_to_category_drops_client_id():
    entity = dto_to_category(CategoryDTO(id=99, name="Rent"))

    assert entity.id is None
    assert entity.name == "Rent"


def test_expense_to_dto_nests_full_category():
    cat = Category(id=1, name="Groceries")
    exp = Expense(id=7, amount=Decimal("12.30"), expense_date=date(2024, 2, 29), category_id=1, category=cat)

    dto = expense_to_dto(exp)

    assert dto.id == 7
    assert dto.amount == Decimal("12.30")
    assert dto.expense_date == date(2024, 2, 29)
    assert dto.category_dto == CategoryDTO(id=1, name="Groceries")


def test_dto_to_expense_uses_resolved_category_not_client_name():
    resolved = Category(id=1, name="Groceries")
    dto = ExpenseDTO(
        amount=Decimal("5.00"),
        expense_date=date(2024, 1, 1),
        category_dto=CategoryDTO(id=1, name="something else"),
    )

    exp = dto_to_expense(dto, resolved)

    assert exp.id is None
    assert exp.category is resolved
    assert exp.category_id == 1
    assert exp.category.name == "Groceries"


def test_expense_dto_serializes_camel_case_with_numeric_amount():
    dto = ExpenseDTO(
        id=1,
        amount=Decimal("10.10"),
        expense_date=date(2025, 10, 9),
        category_dto=CategoryDTO(id=2, name="Fuel"),
    )

    assert dto.model_dump(mode="json", by_alias=True) == {
        "id": 1,
        "amount": 10.1,
        "expenseDate": "2025-10-09",
        "categoryDto": {"id": 2, "name": "Fuel"},
    }
