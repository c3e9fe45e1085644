"""
Housing schema, shared by every housing subcategory.
"""
from typing import Any

from .base import AttributeField, CategorySchema, UNIT_SQUARE_FEET, as_text, is_truthy, quantitative_value


class HousingSchema(CategorySchema):
    """Housing | *"""

    SCHEMA_ORG_TYPE = "SingleFamilyResidence"
    CONDO_TYPE = "Apartment"
    TRAITS = ("Priceable", "Conditional", "Valueable", "Serialized", "LocationBound")
    CONDITION_OPTIONS = ("move_in_ready", "needs_cosmetic", "needs_repair", "teardown")

    ATTRIBUTES = (
        AttributeField(
            key="property_type",
            label="Property Type",
            type="select",
            options=("single_family", "condo", "townhouse", "multi_family", "land", "mobile_home"),
            schema_org="accommodationCategory",
            summary=True,
        ),
        AttributeField(key="beds", label="Bedrooms", type="number", placeholder="3", schema_org="numberOfBedrooms", summary=True),
        AttributeField(key="baths", label="Bathrooms", type="number", placeholder="2", schema_org="numberOfBathroomsTotal", summary=True),
        AttributeField(key="sqft", label="Sq. Ft.", type="number", placeholder="1800", schema_org="floorSize", unit="sqft", summary=True),
        AttributeField(key="lot_size_acres", label="Lot Size (acres)", type="number", placeholder="0.25"),
        AttributeField(key="year_built", label="Year Built", type="number", placeholder="1995", schema_org="yearBuilt"),
        AttributeField(key="stories", label="Stories", type="number", placeholder="2"),
        AttributeField(key="hoa_monthly", label="HOA Monthly ($)", type="number", placeholder="250"),
        AttributeField(key="property_tax_annual", label="Annual Property Tax ($)", type="number", placeholder="3500"),
        AttributeField(key="parcel_id", label="Parcel ID", type="text", placeholder="Tax parcel number"),
    )

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        schema_type = self.CONDO_TYPE if attrs.get("property_type") == "condo" else self.SCHEMA_ORG_TYPE
        ld: dict[str, Any] = {"@type": schema_type}
        if is_truthy(attrs.get("property_type")):
            ld["accommodationCategory"] = attrs["property_type"]
        if is_truthy(attrs.get("beds")):
            ld["numberOfBedrooms"] = attrs["beds"]
        if is_truthy(attrs.get("baths")):
            ld["numberOfBathroomsTotal"] = attrs["baths"]
        if is_truthy(attrs.get("sqft")):
            ld["floorSize"] = quantitative_value(attrs["sqft"], unit_code=UNIT_SQUARE_FEET)
        if is_truthy(attrs.get("year_built")):
            ld["yearBuilt"] = as_text(attrs["year_built"])
        return ld
