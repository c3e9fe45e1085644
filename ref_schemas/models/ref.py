"""
Ref models - listings and their media.

Field comments give the Schema.org property each field exports as, where one exists.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..geo import Coordinates, blur_location
from .base import WireModel


class ListingStatus(str, Enum):
    """Listing visibility status."""
    PRIVATE = "private"
    FOR_SALE = "for_sale"
    WILLING_TO_SELL = "willing_to_sell"
    FOR_RENT = "for_rent"
    ARCHIVED_SOLD = "archived_sold"
    ARCHIVED_DELETED = "archived_deleted"


class RentalDurationUnit(str, Enum):
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


class SellingScope(str, Enum):
    """How far away buyers may see a ref."""
    GLOBAL = "global"
    NATIONAL = "national"
    RANGE = "range"


class MediaType(str, Enum):
    PHOTO = "photo"
    VIDEO = "video"


class RefFields(WireModel):
    """Fields a seller can set on a ref."""
    name: str  # Schema.org: name
    description: str  # Schema.org: description
    category: str  # Schema.org: category
    subcategory: str
    image: Optional[str] = None  # Schema.org: image (URL)
    sku: Optional[str] = None  # Schema.org: sku

    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    # Stored locally only, never shared with peers
    location_address: Optional[str] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    location_zip: Optional[str] = None
    location_country: Optional[str] = None

    selling_scope: Optional[SellingScope] = None
    selling_radius_miles: Optional[float] = Field(
        default=None,
        description="Selling radius in miles when scope is 'range'",
    )

    attributes: Optional[dict[str, Any]] = Field(
        default=None,
        description="Category-specific attributes, keyed by AttributeField.key",
    )
    condition: Optional[str] = None

    rental_terms: Optional[str] = None
    rental_deposit: Optional[float] = None
    rental_duration: Optional[float] = None
    rental_duration_unit: Optional[RentalDurationUnit] = None


class RefCreate(RefFields):
    """Payload for creating a ref. Identity, ownership and timestamps are assigned by the store."""
    listing_status: Optional[ListingStatus] = None
    quantity: Optional[int] = None


class RefUpdate(WireModel):
    """Partial update; only the fields that are set are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    image: Optional[str] = None
    sku: Optional[str] = None
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    location_address: Optional[str] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    location_zip: Optional[str] = None
    location_country: Optional[str] = None
    selling_scope: Optional[SellingScope] = None
    selling_radius_miles: Optional[float] = None
    attributes: Optional[dict[str, Any]] = None
    condition: Optional[str] = None
    rental_terms: Optional[str] = None
    rental_deposit: Optional[float] = None
    rental_duration: Optional[float] = None
    rental_duration_unit: Optional[RentalDurationUnit] = None
    listing_status: Optional[ListingStatus] = None
    quantity: Optional[int] = None


class Ref(RefFields):
    """A listing owned by a beacon."""
    id: str
    listing_status: ListingStatus = ListingStatus.PRIVATE
    quantity: int = 1
    reffo_synced: bool = Field(default=False, description="Whether this ref is synced to reffo.ai")
    reffo_ref_id: Optional[str] = Field(default=None, description="The ref ID on reffo.ai, if synced")
    beacon_id: str = Field(description="Public key of the beacon that owns this ref")
    created_at: str  # Schema.org: dateCreated
    updated_at: str  # Schema.org: dateModified

    def blurred_location(self) -> Optional[Coordinates]:
        """Coordinates safe to share with peers, or None when the ref has no location."""
        if self.location_lat is None or self.location_lng is None:
            return None
        return blur_location(self.location_lat, self.location_lng)

    def apply_update(self, update: RefUpdate) -> "Ref":
        """Return a copy with the fields explicitly set on `update` applied."""
        return self.model_copy(update=update.model_dump(exclude_unset=True))


class RefMedia(WireModel):
    """A photo or video attached to a ref."""
    id: str
    ref_id: str
    media_type: MediaType
    file_path: str
    mime_type: str
    file_size: int
    sort_order: int = 0
    created_at: str
