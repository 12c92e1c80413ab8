from typing import Optional
from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

class CategoryDTO(BaseModel):
    """Wire shape of a category. ``id`` is ignored on input."""
    id: Optional[StrictInt] = None
    name: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": {"id": 1, "name": "Groceries"}},
    )
