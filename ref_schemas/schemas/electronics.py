"""
Electronics schemas.
"""
from typing import Any

from .base import AttributeField, CategorySchema, is_truthy, named_entity, property_value


class PhoneSchema(CategorySchema):
    """Electronics | Phones & Tablets"""

    SCHEMA_ORG_TYPE = "IndividualProduct"
    ADDITIONAL_TYPE = "Smartphone"
    TRAITS = ("Priceable", "Conditional", "Valueable", "Serialized")
    CONDITION_OPTIONS = ("new_sealed", "like_new", "excellent", "good", "fair", "poor", "for_parts")

    ATTRIBUTES = (
        AttributeField(key="manufacturer", label="Brand", type="text", placeholder="Apple", schema_org="brand", summary=True),
        AttributeField(key="model", label="Model", type="text", placeholder="iPhone 15 Pro", schema_org="model", summary=True),
        AttributeField(key="storage_gb", label="Storage (GB)", type="number", placeholder="256", summary=True),
        AttributeField(key="network", label="Network", type="select", options=("5G", "4G LTE", "3G", "WiFi only")),
        AttributeField(key="carrier_locked", label="Carrier Locked", type="select", options=("unlocked", "AT&T", "T-Mobile", "Verizon", "other")),
        AttributeField(key="battery_health_percent", label="Battery Health (%)", type="number", placeholder="92"),
        AttributeField(key="imei", label="IMEI", type="text", placeholder="Serial number", schema_org="serialNumber"),
        AttributeField(key="color", label="Color", type="text", placeholder="Space Black", schema_org="color"),
        AttributeField(key="original_box", label="Original Box", type="boolean"),
    )

    # Attributes without a Schema.org property, exported as PropertyValue entries in this order:
    # (attribute key, property name, unit text)
    ADDITIONAL_PROPERTIES = (
        ("storage_gb", "storageGB", None),
        ("network", "network", None),
        ("carrier_locked", "carrierLocked", None),
        ("battery_health_percent", "batteryHealth", "%"),
    )

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        ld = self._base_record()
        if is_truthy(attrs.get("manufacturer")):
            ld["brand"] = named_entity("Brand", attrs["manufacturer"])
        if is_truthy(attrs.get("model")):
            ld["model"] = attrs["model"]
        if is_truthy(attrs.get("color")):
            ld["color"] = attrs["color"]
        if is_truthy(attrs.get("imei")):
            ld["serialNumber"] = attrs["imei"]

        extra = [
            property_value(name, attrs[key], unit_text=unit)
            for key, name, unit in self.ADDITIONAL_PROPERTIES
            if is_truthy(attrs.get(key))
        ]
        if extra:
            ld["additionalProperty"] = extra
        return ld
