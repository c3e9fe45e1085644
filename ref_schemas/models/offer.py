"""
Offer models - sale terms attached to a ref.
"""
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import WireModel


class OfferStatus(str, Enum):
    """Maps to Schema.org availability."""
    ACTIVE = "active"
    SOLD = "sold"
    WITHDRAWN = "withdrawn"


class OfferCreate(WireModel):
    ref_id: str
    price: float  # Schema.org: price
    price_currency: str = Field(description="ISO 4217 currency code")
    status: Optional[OfferStatus] = None
    location: Optional[str] = None  # Schema.org: availableAtOrFrom


class OfferUpdate(WireModel):
    price: Optional[float] = None
    price_currency: Optional[str] = None
    status: Optional[OfferStatus] = None
    location: Optional[str] = None


class Offer(WireModel):
    """Sale terms for a ref."""
    id: str
    ref_id: str
    price: float
    price_currency: str
    status: OfferStatus = OfferStatus.ACTIVE
    seller_id: str = Field(description="Seller beacon public key")
    location: Optional[str] = None
    created_at: str
    updated_at: str

    def apply_update(self, update: OfferUpdate) -> "Offer":
        """Return a copy with the fields explicitly set on `update` applied."""
        return self.model_copy(update=update.model_dump(exclude_unset=True))
