"""
Shared pydantic base for wire-facing records.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Snake_case in Python, camelCase on the wire.

    `model_dump(by_alias=True)` produces the shape peers and the local API exchange.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
