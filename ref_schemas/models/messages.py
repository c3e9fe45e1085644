"""
Peer message models - payloads exchanged between beacons over the DHT.

Every message is self-describing: a `type` discriminator, the sending beacon's
id, and a `payload` whose shape is determined by `type`.
"""
import logging
from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field

from .base import WireModel
from .negotiation import NegotiationStatus
from .offer import Offer, OfferStatus
from .ref import ListingStatus, Ref, SellingScope


logger = logging.getLogger(__name__)


class PeerMessageType(str, Enum):
    QUERY = "query"
    RESPONSE = "response"
    ANNOUNCE = "announce"
    PROPOSAL = "proposal"
    PROPOSAL_RESPONSE = "proposal_response"


class QueryPayload(WireModel):
    """Search request broadcast to peers. All criteria are optional."""
    category: Optional[str] = None
    subcategory: Optional[str] = None
    search: Optional[str] = None
    max_price: Optional[float] = None
    currency: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    radius_miles: Optional[float] = None


class AnnouncedRef(WireModel):
    """The public subset of a ref. Coordinates are blurred, the street address is never included."""
    id: str
    name: str
    category: str
    subcategory: str
    listing_status: ListingStatus
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    location_zip: Optional[str] = None
    location_country: Optional[str] = None
    selling_scope: Optional[SellingScope] = None
    selling_radius_miles: Optional[float] = None

    @classmethod
    def from_ref(cls, ref: Ref) -> "AnnouncedRef":
        blurred = ref.blurred_location()
        return cls(
            id=ref.id,
            name=ref.name,
            category=ref.category,
            subcategory=ref.subcategory,
            listing_status=ref.listing_status,
            location_lat=blurred.lat if blurred else None,
            location_lng=blurred.lng if blurred else None,
            location_city=ref.location_city,
            location_state=ref.location_state,
            location_zip=ref.location_zip,
            location_country=ref.location_country,
            selling_scope=ref.selling_scope,
            selling_radius_miles=ref.selling_radius_miles,
        )


class AnnouncedOffer(WireModel):
    id: str
    ref_id: str
    price: float
    price_currency: str
    status: OfferStatus

    @classmethod
    def from_offer(cls, offer: Offer) -> "AnnouncedOffer":
        return cls(
            id=offer.id,
            ref_id=offer.ref_id,
            price=offer.price,
            price_currency=offer.price_currency,
            status=offer.status,
        )


class AnnouncePayload(WireModel):
    refs: list[AnnouncedRef] = Field(default_factory=list)
    offers: list[AnnouncedOffer] = Field(default_factory=list)

    @classmethod
    def from_records(cls, refs: list[Ref], offers: list[Offer]) -> "AnnouncePayload":
        """Build an announcement from locally stored refs and offers."""
        return cls(
            refs=[AnnouncedRef.from_ref(ref) for ref in refs],
            offers=[AnnouncedOffer.from_offer(offer) for offer in offers],
        )


class ProposalPayload(WireModel):
    """A buyer's offer to the seller."""
    negotiation_id: str
    ref_id: str
    ref_name: str
    price: float
    price_currency: str
    message: str = ""


class ProposalResponsePayload(WireModel):
    """The seller's answer to a proposal."""
    negotiation_id: str
    status: NegotiationStatus
    counter_price: Optional[float] = None
    response_message: Optional[str] = None


PAYLOAD_MODELS: dict[str, type[WireModel]] = {
    PeerMessageType.QUERY.value: QueryPayload,
    PeerMessageType.ANNOUNCE.value: AnnouncePayload,
    PeerMessageType.PROPOSAL.value: ProposalPayload,
    PeerMessageType.PROPOSAL_RESPONSE.value: ProposalResponsePayload,
}


class PeerMessage(WireModel):
    """Envelope for every message exchanged between beacons."""
    type: PeerMessageType
    beacon_id: str = Field(description="Public key of the sending beacon")
    payload: Any = None

    @classmethod
    def wrap(cls, beacon_id: str, payload: WireModel) -> "PeerMessage":
        """Wrap a typed payload, inferring the message type from its model."""
        for message_type, model in PAYLOAD_MODELS.items():
            if isinstance(payload, model):
                return cls(type=message_type, beacon_id=beacon_id, payload=payload.to_wire())
        raise TypeError(f"No message type for payload {type(payload).__name__}")

    def typed_payload(self) -> Union[WireModel, Any]:
        """
        Parse `payload` into the model declared for this message type.

        `response` messages have no declared payload shape; their payload is returned as-is.
        Raises pydantic.ValidationError if the payload does not match.
        """
        model = PAYLOAD_MODELS.get(self.type)
        if model is None:
            logger.debug(f"No payload model for message type '{self.type}', returning raw payload")
            return self.payload
        if isinstance(self.payload, model):
            return self.payload
        return model.model_validate(self.payload)

    def to_json(self) -> str:
        payload = self.payload.to_wire() if isinstance(self.payload, WireModel) else self.payload
        return self.model_copy(update={"payload": payload}).model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "PeerMessage":
        return cls.model_validate_json(data)
