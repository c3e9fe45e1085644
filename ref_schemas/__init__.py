"""
Shared data model and category schemas for Reffo refs, offers and negotiations.
"""

from .geo import Coordinates, blur_location, haversine_distance_miles, is_within_radius
from .linked_data import BaseFields, base_fields_from, build_ref_linked_data, build_schema_org_ld
from .schemas import (
    AttributeField,
    CategorySchema,
    CATEGORY_SCHEMAS,
    default_schema,
    get_category_schema,
    list_categories,
)
from .models import (
    ListingStatus,
    RentalDurationUnit,
    SellingScope,
    MediaType,
    Ref,
    RefCreate,
    RefUpdate,
    RefMedia,
    OfferStatus,
    Offer,
    OfferCreate,
    OfferUpdate,
    NegotiationStatus,
    NegotiationRole,
    Negotiation,
    NegotiationCreate,
    BeaconSettings,
    BeaconInfo,
    PeerMessageType,
    PeerMessage,
    QueryPayload,
    AnnouncePayload,
    ProposalPayload,
    ProposalResponsePayload,
)

__all__ = [
    # Geometry
    "Coordinates",
    "blur_location",
    "haversine_distance_miles",
    "is_within_radius",
    # Linked data
    "BaseFields",
    "base_fields_from",
    "build_ref_linked_data",
    "build_schema_org_ld",
    # Schemas
    "AttributeField",
    "CategorySchema",
    "CATEGORY_SCHEMAS",
    "default_schema",
    "get_category_schema",
    "list_categories",
    # Models
    "ListingStatus",
    "RentalDurationUnit",
    "SellingScope",
    "MediaType",
    "Ref",
    "RefCreate",
    "RefUpdate",
    "RefMedia",
    "OfferStatus",
    "Offer",
    "OfferCreate",
    "OfferUpdate",
    "NegotiationStatus",
    "NegotiationRole",
    "Negotiation",
    "NegotiationCreate",
    "BeaconSettings",
    "BeaconInfo",
    "PeerMessageType",
    "PeerMessage",
    "QueryPayload",
    "AnnouncePayload",
    "ProposalPayload",
    "ProposalResponsePayload",
]
