"""
Pydantic models for refs, offers, negotiations, beacons and peer messages.
"""

from .base import WireModel
from .ref import (
    ListingStatus,
    RentalDurationUnit,
    SellingScope,
    MediaType,
    Ref,
    RefCreate,
    RefUpdate,
    RefMedia,
)
from .offer import OfferStatus, Offer, OfferCreate, OfferUpdate
from .negotiation import NegotiationStatus, NegotiationRole, Negotiation, NegotiationCreate
from .beacon import BeaconSettings, BeaconInfo, DhtStatus
from .messages import (
    PeerMessageType,
    PeerMessage,
    QueryPayload,
    AnnouncePayload,
    AnnouncedRef,
    AnnouncedOffer,
    ProposalPayload,
    ProposalResponsePayload,
)

__all__ = [
    "WireModel",
    # Refs
    "ListingStatus",
    "RentalDurationUnit",
    "SellingScope",
    "MediaType",
    "Ref",
    "RefCreate",
    "RefUpdate",
    "RefMedia",
    # Offers
    "OfferStatus",
    "Offer",
    "OfferCreate",
    "OfferUpdate",
    # Negotiations
    "NegotiationStatus",
    "NegotiationRole",
    "Negotiation",
    "NegotiationCreate",
    # Beacon
    "BeaconSettings",
    "BeaconInfo",
    "DhtStatus",
    # Peer messages
    "PeerMessageType",
    "PeerMessage",
    "QueryPayload",
    "AnnouncePayload",
    "AnnouncedRef",
    "AnnouncedOffer",
    "ProposalPayload",
    "ProposalResponsePayload",
]
