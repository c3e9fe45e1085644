"""
Base class for category schemas.

Each schema declares the form attributes for a listing category, the
conditions that make sense for it, and how its attributes map onto Schema.org
JSON-LD.
"""
import math
from abc import ABC, abstractmethod
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator


def is_truthy(value: Any) -> bool:
    """
    Whether an attribute value counts as set.

    None, "", False, numeric zero and NaN are unset. Everything else is set,
    including empty lists and dicts.
    """
    if value is None or value is False:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def is_present(value: Any) -> bool:
    """Looser check used for price: only None counts as missing, so zero survives."""
    return value is not None


def as_text(value: Any) -> str:
    """Stringify a value for a text-typed JSON-LD property ("2020", not "2020.0")."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def quantitative_value(value: Any, unit_code: Optional[str] = None, unit_text: Optional[str] = None) -> dict:
    """Schema.org QuantitativeValue for a measured attribute."""
    quantity: dict[str, Any] = {"@type": "QuantitativeValue", "value": value}
    if unit_code:
        quantity["unitCode"] = unit_code
    if unit_text:
        quantity["unitText"] = unit_text
    return quantity


def named_entity(schema_type: str, name: Any) -> dict:
    return {"@type": schema_type, "name": name}


def property_value(name: str, value: Any, unit_text: Optional[str] = None) -> dict:
    prop: dict[str, Any] = {"@type": "PropertyValue", "name": name, "value": value}
    if unit_text:
        prop["unitText"] = unit_text
    return prop


# UN/CEFACT unit codes
UNIT_MILES = "SMI"
UNIT_INCHES = "INH"
UNIT_SQUARE_FEET = "FTK"


class AttributeField(BaseModel):
    """A single form attribute of a category."""
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    type: Literal["text", "number", "select", "boolean"]
    placeholder: Optional[str] = None
    options: Optional[tuple[str, ...]] = None
    schema_org: Optional[str] = None  # Schema.org property this attribute exports as
    summary: bool = False  # Shown in compact views
    unit: Optional[str] = None

    @model_validator(mode="after")
    def check_select_options(self) -> "AttributeField":
        if self.type == "select" and not self.options:
            raise ValueError(f"select field '{self.key}' needs options")
        return self


class CategorySchema(ABC):
    """Base class for listing category schemas."""

    # Override in subclasses
    SCHEMA_ORG_TYPE: str = "Product"
    ADDITIONAL_TYPE: Optional[str] = None

    # Descriptive capability tags, not enforced here
    TRAITS: tuple[str, ...] = ()

    # Empty means condition does not apply to the category
    CONDITION_OPTIONS: tuple[str, ...] = ()

    ATTRIBUTES: tuple[AttributeField, ...] = ()

    @abstractmethod
    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """
        Map flat attributes to a partial Schema.org JSON-LD record.

        Args:
            attrs: Attribute values keyed by AttributeField.key

        Returns:
            A new dict with at least "@type" set
        """
        pass

    def _base_record(self) -> dict[str, Any]:
        ld: dict[str, Any] = {"@type": self.SCHEMA_ORG_TYPE}
        if self.ADDITIONAL_TYPE:
            ld["additionalType"] = self.ADDITIONAL_TYPE
        return ld

    @property
    def schema_org_type(self) -> str:
        return self.SCHEMA_ORG_TYPE

    @property
    def additional_type(self) -> Optional[str]:
        return self.ADDITIONAL_TYPE

    @property
    def traits(self) -> tuple[str, ...]:
        return self.TRAITS

    @property
    def condition_options(self) -> tuple[str, ...]:
        return self.CONDITION_OPTIONS

    @property
    def attributes(self) -> tuple[AttributeField, ...]:
        return self.ATTRIBUTES

    def get_field(self, key: str) -> Optional[AttributeField]:
        for field in self.ATTRIBUTES:
            if field.key == key:
                return field
        return None

    def summary_fields(self) -> list[AttributeField]:
        """Attributes shown in compact listing views."""
        return [field for field in self.ATTRIBUTES if field.summary]

    def accepts_condition(self, condition: str) -> bool:
        return condition in self.CONDITION_OPTIONS

    def has_trait(self, trait: str) -> bool:
        return trait in self.TRAITS

    def __repr__(self) -> str:
        return f"{type(self).__name__}(schema_org_type={self.SCHEMA_ORG_TYPE!r})"
