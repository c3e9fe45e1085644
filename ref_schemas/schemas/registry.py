"""
Registry of category schemas keyed by "Category|Subcategory".

Built once at import and read-only afterwards.
"""
import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .base import CategorySchema
from .collectibles import ArtSchema
from .default import DefaultSchema
from .electronics import PhoneSchema
from .home_garden import FurnitureSchema
from .housing import HousingSchema
from .services import DiningServiceSchema
from .vehicles import BoatSchema, CarSchema


logger = logging.getLogger(__name__)

KEY_SEPARATOR = "|"

default_schema: CategorySchema = DefaultSchema()

_housing = HousingSchema()

# Order matters: category-only lookups return the first subcategory registered.
CATEGORY_SCHEMAS: Mapping[str, CategorySchema] = MappingProxyType({
    "Vehicles|Cars": CarSchema(),
    "Vehicles|Boats": BoatSchema(),
    "Housing|Single Family Homes": _housing,
    "Housing|Condos": _housing,
    "Housing|Townhouses": _housing,
    "Housing|Multi-Family": _housing,
    "Housing|Land": _housing,
    "Electronics|Phones & Tablets": PhoneSchema(),
    "Home & Garden|Furniture": FurnitureSchema(),
    "Collectibles|Art": ArtSchema(),
    "Other|Services": DiningServiceSchema(),
})


def schema_key(category: str, subcategory: str) -> str:
    return f"{category}{KEY_SEPARATOR}{subcategory}"


def get_category_schema(
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
) -> CategorySchema:
    """
    Look up the CategorySchema for a category + subcategory.

    Falls back to the first schema registered under the category, then to
    `default_schema`. Never raises.
    """
    if category and subcategory:
        exact = CATEGORY_SCHEMAS.get(schema_key(category, subcategory))
        if exact is not None:
            return exact

    if category:
        prefix = category + KEY_SEPARATOR
        for key, schema in CATEGORY_SCHEMAS.items():
            if key.startswith(prefix):
                logger.debug(f"No schema for '{category}|{subcategory}', using '{key}'")
                return schema

    logger.debug(f"No schema for '{category}|{subcategory}', using default")
    return default_schema


def list_categories() -> dict[str, list[str]]:
    """Categories mapped to their registered subcategories, in registration order."""
    categories: dict[str, list[str]] = {}
    for key in CATEGORY_SCHEMAS:
        category, _, subcategory = key.partition(KEY_SEPARATOR)
        categories.setdefault(category, []).append(subcategory)
    return categories
