"""
Negotiation models - buyer/seller bargaining over a ref.
"""
from enum import Enum
from typing import Optional

from .base import WireModel


class NegotiationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COUNTERED = "countered"
    WITHDRAWN = "withdrawn"
    SOLD = "sold"


class NegotiationRole(str, Enum):
    """Which side of the negotiation the local beacon is on."""
    BUYER = "buyer"
    SELLER = "seller"


class NegotiationCreate(WireModel):
    id: str
    ref_id: str
    ref_name: str
    buyer_beacon_id: str
    seller_beacon_id: str
    price: float
    price_currency: str
    message: str = ""
    role: NegotiationRole
    status: Optional[NegotiationStatus] = None


class Negotiation(WireModel):
    """
    A proposal from a buyer and the seller's latest answer to it.
    """
    id: str
    ref_id: str
    ref_name: str
    buyer_beacon_id: str
    seller_beacon_id: str
    price: float
    price_currency: str
    message: str = ""
    status: NegotiationStatus = NegotiationStatus.PENDING
    role: NegotiationRole
    counter_price: Optional[float] = None
    response_message: Optional[str] = None
    created_at: str
    updated_at: str
