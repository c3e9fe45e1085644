"""
Vehicle schemas: cars and boats.
"""
from typing import Any

from .base import (
    AttributeField,
    CategorySchema,
    UNIT_MILES,
    as_text,
    is_truthy,
    named_entity,
    quantitative_value,
)


VEHICLE_TRAITS = ("Priceable", "Conditional", "Valueable", "Serialized", "LocationBound")


class CarSchema(CategorySchema):
    """Vehicles | Cars"""

    SCHEMA_ORG_TYPE = "Car"
    TRAITS = VEHICLE_TRAITS
    CONDITION_OPTIONS = ("excellent", "good", "fair", "poor", "parts_only")

    ATTRIBUTES = (
        AttributeField(key="year", label="Year", type="number", placeholder="2020", schema_org="vehicleModelDate", summary=True),
        AttributeField(key="make", label="Make", type="text", placeholder="Toyota", schema_org="brand", summary=True),
        AttributeField(key="model", label="Model", type="text", placeholder="Camry", schema_org="model", summary=True),
        AttributeField(key="trim", label="Trim", type="text", placeholder="XLE"),
        AttributeField(key="mileage", label="Mileage", type="number", placeholder="45000", schema_org="mileageFromOdometer", unit="mi", summary=True),
        AttributeField(key="transmission", label="Transmission", type="select", options=("automatic", "manual", "cvt"), schema_org="vehicleTransmission"),
        AttributeField(
            key="body_type",
            label="Body Type",
            type="select",
            options=("sedan", "suv", "truck", "coupe", "convertible", "van", "wagon", "hatchback"),
            schema_org="bodyType",
        ),
        AttributeField(key="title_status", label="Title Status", type="select", options=("clean", "salvage", "rebuilt", "lemon"), summary=True),
        AttributeField(key="vin", label="VIN", type="text", placeholder="1HGCM82633A004352", schema_org="vehicleIdentificationNumber"),
        AttributeField(key="accidents", label="Known Accidents", type="number", placeholder="0", schema_org="knownVehicleDamages"),
        AttributeField(key="service_history", label="Service History", type="select", options=("full", "partial", "none", "unknown")),
    )

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        ld = self._base_record()
        if is_truthy(attrs.get("year")):
            ld["vehicleModelDate"] = as_text(attrs["year"])
        if is_truthy(attrs.get("make")):
            ld["brand"] = named_entity("Brand", attrs["make"])
        if is_truthy(attrs.get("model")):
            ld["model"] = attrs["model"]
        if is_truthy(attrs.get("mileage")):
            ld["mileageFromOdometer"] = quantitative_value(attrs["mileage"], unit_code=UNIT_MILES)
        if is_truthy(attrs.get("transmission")):
            ld["vehicleTransmission"] = attrs["transmission"]
        if is_truthy(attrs.get("body_type")):
            ld["bodyType"] = attrs["body_type"]
        if is_truthy(attrs.get("vin")):
            ld["vehicleIdentificationNumber"] = attrs["vin"]
        # Zero accidents is indistinguishable from "not given" and is left out
        if is_truthy(attrs.get("accidents")):
            ld["knownVehicleDamages"] = as_text(attrs["accidents"])
        return ld


class BoatSchema(CategorySchema):
    """Vehicles | Boats"""

    SCHEMA_ORG_TYPE = "Vehicle"
    ADDITIONAL_TYPE = "Boat"
    TRAITS = VEHICLE_TRAITS
    CONDITION_OPTIONS = ("excellent", "good", "fair", "project", "parts")

    ATTRIBUTES = (
        AttributeField(key="year", label="Year", type="number", placeholder="2018", schema_org="productionDate", summary=True),
        AttributeField(key="manufacturer", label="Manufacturer", type="text", placeholder="Boston Whaler", schema_org="brand", summary=True),
        AttributeField(key="model", label="Model", type="text", placeholder="Montauk 170", schema_org="model", summary=True),
        AttributeField(key="length_feet", label="Length (ft)", type="number", placeholder="17", schema_org="length"),
        AttributeField(
            key="boat_type",
            label="Boat Type",
            type="select",
            options=("center_console", "bowrider", "pontoon", "sailboat", "cabin_cruiser", "fishing", "kayak", "jet_ski", "other"),
            schema_org="bodyType",
        ),
        AttributeField(key="hull_material", label="Hull Material", type="select", options=("fiberglass", "aluminum", "wood", "inflatable", "composite")),
        AttributeField(key="engine_hours", label="Engine Hours", type="number", placeholder="350", schema_org="mileageFromOdometer", summary=True),
        AttributeField(key="engine_make", label="Engine Make", type="text", placeholder="Mercury"),
        AttributeField(key="fuel_type", label="Fuel Type", type="select", options=("gasoline", "diesel", "electric", "none"), schema_org="fuelType"),
        AttributeField(key="hin", label="HIN", type="text", placeholder="Hull ID Number", schema_org="vehicleIdentificationNumber"),
        AttributeField(key="trailer_included", label="Trailer Included", type="boolean"),
    )

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        ld = self._base_record()
        if is_truthy(attrs.get("year")):
            ld["productionDate"] = as_text(attrs["year"])
        if is_truthy(attrs.get("manufacturer")):
            ld["brand"] = named_entity("Brand", attrs["manufacturer"])
        if is_truthy(attrs.get("model")):
            ld["model"] = attrs["model"]
        if is_truthy(attrs.get("boat_type")):
            ld["bodyType"] = attrs["boat_type"]
        if is_truthy(attrs.get("engine_hours")):
            ld["mileageFromOdometer"] = quantitative_value(attrs["engine_hours"], unit_text="hours")
        if is_truthy(attrs.get("fuel_type")):
            ld["fuelType"] = attrs["fuel_type"]
        if is_truthy(attrs.get("hin")):
            ld["vehicleIdentificationNumber"] = attrs["hin"]
        return ld
