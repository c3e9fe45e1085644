"""Category schemas and the registry that resolves them."""

from .base import AttributeField, CategorySchema, is_truthy, is_present
from .vehicles import CarSchema, BoatSchema
from .housing import HousingSchema
from .electronics import PhoneSchema
from .home_garden import FurnitureSchema
from .collectibles import ArtSchema
from .services import DiningServiceSchema
from .default import DefaultSchema
from .registry import CATEGORY_SCHEMAS, default_schema, get_category_schema, list_categories

__all__ = [
    "AttributeField",
    "CategorySchema",
    "is_truthy",
    "is_present",
    "CarSchema",
    "BoatSchema",
    "HousingSchema",
    "PhoneSchema",
    "FurnitureSchema",
    "ArtSchema",
    "DiningServiceSchema",
    "DefaultSchema",
    "CATEGORY_SCHEMAS",
    "default_schema",
    "get_category_schema",
    "list_categories",
]
