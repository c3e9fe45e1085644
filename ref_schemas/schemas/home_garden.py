"""
Home & Garden schemas.
"""
from typing import Any

from .base import AttributeField, CategorySchema, UNIT_INCHES, is_truthy, quantitative_value


class FurnitureSchema(CategorySchema):
    """Home & Garden | Furniture"""

    SCHEMA_ORG_TYPE = "Product"
    ADDITIONAL_TYPE = "Furniture"
    TRAITS = ("Priceable", "Conditional", "LocationBound")
    CONDITION_OPTIONS = ("like_new", "good", "fair", "well_loved", "needs_reupholstery")

    ATTRIBUTES = (
        AttributeField(
            key="furniture_type",
            label="Type",
            type="select",
            options=("sofa", "chair", "table", "desk", "bed", "dresser", "bookshelf", "cabinet", "outdoor", "other"),
            summary=True,
        ),
        AttributeField(
            key="material",
            label="Material",
            type="select",
            options=("wood", "metal", "fabric", "leather", "glass", "plastic", "mixed"),
            schema_org="material",
            summary=True,
        ),
        AttributeField(key="seating_capacity", label="Seating Capacity", type="number", placeholder="3"),
        AttributeField(key="color", label="Color", type="text", placeholder="Charcoal", schema_org="color"),
        AttributeField(key="width", label="Width (in)", type="number", placeholder="84", schema_org="width"),
        AttributeField(key="depth", label="Depth (in)", type="number", placeholder="38", schema_org="depth"),
        AttributeField(key="height", label="Height (in)", type="number", placeholder="34", schema_org="height"),
        AttributeField(key="pet_free_home", label="Pet-Free Home", type="boolean"),
        AttributeField(key="smoke_free_home", label="Smoke-Free Home", type="boolean"),
    )

    DIMENSIONS = ("width", "depth", "height")

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        ld = self._base_record()
        if is_truthy(attrs.get("material")):
            ld["material"] = attrs["material"]
        if is_truthy(attrs.get("color")):
            ld["color"] = attrs["color"]
        for dimension in self.DIMENSIONS:
            if is_truthy(attrs.get(dimension)):
                ld[dimension] = quantitative_value(attrs[dimension], unit_code=UNIT_INCHES)
        return ld
