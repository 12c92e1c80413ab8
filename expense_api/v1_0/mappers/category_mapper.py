from expense_api.v1_0.entities import CategoryDTO
from expense_api.v1_0.models import Category

def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(id=category.id, name=category.name)

def dto_to_category(dto: CategoryDTO) -> Category:
    """New, unsaved entity; the store assigns the id."""
    return Category(name=dto.name)
