"""
Fallback schema for categories without a dedicated one.
"""
from typing import Any

from .base import CategorySchema


class DefaultSchema(CategorySchema):
    SCHEMA_ORG_TYPE = "Product"
    TRAITS = ("Priceable",)
    CONDITION_OPTIONS = ("new", "like_new", "good", "fair", "poor")
    ATTRIBUTES = ()

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        return {"@type": self.SCHEMA_ORG_TYPE}
