"""
Schema.org JSON-LD assembly for refs.

The category schema maps the ref's attributes; the universal listing fields
(name, description, timestamps, offer) are layered on top afterwards, so they
win over any builder output that uses the same key.
"""
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import Field

from .config import get_config
from .models.base import WireModel
from .models.offer import Offer, OfferStatus
from .models.ref import Ref
from .schemas.base import is_present, is_truthy
from .schemas.registry import get_category_schema


logger = logging.getLogger(__name__)


class BaseFields(WireModel):
    """Universal listing fields, a subset of Ref and Offer."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float]] = None
    currency: Optional[str] = None
    condition: Optional[str] = None
    image: Optional[str] = None
    sku: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    offer_status: Optional[str] = Field(default=None, description="Exported as offers.availability")
    seller_id: Optional[str] = None
    offer_location: Optional[str] = Field(default=None, description="Exported as offers.availableAtOrFrom")


def base_fields_from(ref: Ref, offer: Optional[Offer] = None) -> BaseFields:
    """Collect the base fields for a ref and, if it has one, its offer."""
    fields: dict[str, Any] = {
        "name": ref.name,
        "description": ref.description,
        "condition": ref.condition,
        "image": ref.image,
        "sku": ref.sku,
        "created_at": ref.created_at,
        "updated_at": ref.updated_at,
    }
    if offer is not None:
        fields.update({
            "price": offer.price,
            "currency": offer.price_currency,
            # A defaulted status is still the enum member, not its value
            "offer_status": OfferStatus(offer.status).value,
            "seller_id": offer.seller_id,
            "offer_location": offer.location,
        })
    return BaseFields(**fields)


def _build_offer(fields: BaseFields, default_currency: str) -> dict[str, Any]:
    offer: dict[str, Any] = {
        "@type": "Offer",
        "price": fields.price,
        "priceCurrency": fields.currency or default_currency,
    }
    if is_truthy(fields.offer_status):
        offer["availability"] = fields.offer_status
    if is_truthy(fields.seller_id):
        offer["seller"] = {"@type": "Organization", "@id": fields.seller_id}
    if is_truthy(fields.offer_location):
        offer["availableAtOrFrom"] = fields.offer_location
    return offer


def build_schema_org_ld(
    category: Optional[str],
    subcategory: Optional[str],
    attrs: Optional[Mapping[str, Any]],
    base_fields: Union[BaseFields, Mapping[str, Any], None],
) -> dict[str, Any]:
    """
    Build a Schema.org JSON-LD object from a ref's attributes and category schema.

    Args:
        category: Ref category, e.g. "Vehicles"
        subcategory: Ref subcategory, e.g. "Cars"
        attrs: Category-specific attributes keyed by AttributeField.key
        base_fields: BaseFields, or a mapping with camelCase or snake_case keys

    Returns:
        JSON-LD dict ready to embed in a page
    """
    config = get_config().linked_data
    if not isinstance(base_fields, BaseFields):
        base_fields = BaseFields.model_validate(dict(base_fields or {}))

    schema = get_category_schema(category, subcategory)
    ld = schema.build_schema_org(dict(attrs or {}))

    ld["@context"] = {
        "@vocab": config.vocab_url,
        config.namespace_prefix: config.namespace_url,
    }

    if is_truthy(base_fields.name):
        ld["name"] = base_fields.name
    if is_truthy(base_fields.description):
        ld["description"] = base_fields.description
    if is_truthy(base_fields.image):
        ld["image"] = base_fields.image
    if is_truthy(base_fields.sku):
        ld["sku"] = base_fields.sku
    if is_truthy(base_fields.created_at):
        ld["dateCreated"] = base_fields.created_at
    if is_truthy(base_fields.updated_at):
        ld["dateModified"] = base_fields.updated_at
    # Condition vocabularies differ per category, so it lives in our namespace
    if is_truthy(base_fields.condition):
        ld[config.condition_key] = base_fields.condition

    # Zero is a real price
    if is_present(base_fields.price):
        ld["offers"] = _build_offer(base_fields, config.default_currency)

    logger.debug(f"Built JSON-LD @type={ld['@type']} for '{category}|{subcategory}'")
    return ld


def build_ref_linked_data(ref: Ref, offer: Optional[Offer] = None) -> dict[str, Any]:
    """JSON-LD for a stored ref and its offer."""
    return build_schema_org_ld(
        ref.category,
        ref.subcategory,
        ref.attributes,
        base_fields_from(ref, offer),
    )
