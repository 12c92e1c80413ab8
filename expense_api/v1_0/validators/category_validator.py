from expense_api.v1_0.entities import CategoryDTO
from .result import ValidationResult

NAME_MAX_LENGTH = 120

def validate_category(dto: CategoryDTO) -> ValidationResult:
    result = ValidationResult()
    name = dto.name
    if name is None or not name.strip():
        result.add("name", "required", "must not be blank")
    elif len(name) > NAME_MAX_LENGTH:
        result.add("name", "length", f"must be at most {NAME_MAX_LENGTH} characters")
    return result
