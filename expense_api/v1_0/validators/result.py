from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True, frozen=True)
class FieldError:
    field: str
    code: str
    message: str

@dataclass(slots=True)
class ValidationResult:
    """Outcome of an explicit validation pass; empty ``errors`` means valid."""
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field_name: str, code: str, message: str) -> None:
        self.errors.append(FieldError(field_name, code, message))
