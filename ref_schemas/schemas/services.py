"""
Service schemas.
"""
from typing import Any

from .base import AttributeField, CategorySchema, is_truthy, named_entity


class DiningServiceSchema(CategorySchema):
    """
    Other | Services

    Restaurant gift cards, coupons and vouchers. The record itself is an Offer;
    the restaurant is attached as the FoodEstablishment making it.
    """

    SCHEMA_ORG_TYPE = "Offer"
    ADDITIONAL_TYPE = "FoodEstablishment"
    TRAITS = ("Priceable", "Consumable", "TimeBounded", "LocationBound")
    CONDITION_OPTIONS = ()

    ATTRIBUTES = (
        AttributeField(key="restaurant_name", label="Restaurant Name", type="text", placeholder="Joe's Bistro", summary=True),
        AttributeField(key="cuisine_type", label="Cuisine", type="text", placeholder="Italian", schema_org="servesCuisine", summary=True),
        AttributeField(key="offer_type", label="Offer Type", type="select", options=("gift_card", "coupon", "voucher", "discount"), summary=True),
        AttributeField(key="offer_value", label="Face Value ($)", type="number", placeholder="50"),
        AttributeField(key="min_purchase", label="Min. Purchase ($)", type="number", placeholder="0"),
        AttributeField(key="valid_days", label="Valid Days", type="text", placeholder="Mon-Fri"),
        AttributeField(key="valid_hours", label="Valid Hours", type="text", placeholder="11am-3pm"),
        AttributeField(key="expires_at", label="Expiration Date", type="text", placeholder="YYYY-MM-DD", schema_org="validThrough"),
    )

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        # ADDITIONAL_TYPE describes the establishment, not the offer, so only @type is set here
        ld: dict[str, Any] = {"@type": self.SCHEMA_ORG_TYPE}
        if is_truthy(attrs.get("restaurant_name")):
            establishment = named_entity(self.ADDITIONAL_TYPE, attrs["restaurant_name"])
            if is_truthy(attrs.get("cuisine_type")):
                establishment["servesCuisine"] = attrs["cuisine_type"]
            ld["offeredBy"] = establishment
        if is_truthy(attrs.get("expires_at")):
            ld["validThrough"] = attrs["expires_at"]
        return ld
