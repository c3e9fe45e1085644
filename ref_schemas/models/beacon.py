"""
Beacon models - local node settings and status.
"""
from typing import Optional

from pydantic import Field

from .base import WireModel
from .ref import SellingScope


class BeaconSettings(WireModel):
    """Defaults applied to new refs created on this beacon."""
    id: str
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    location_address: Optional[str] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    location_zip: Optional[str] = None
    location_country: Optional[str] = None
    default_selling_scope: SellingScope = SellingScope.GLOBAL
    default_selling_radius_miles: float = 25


class DhtStatus(WireModel):
    connected: bool = False
    peers: int = Field(default=0, ge=0)


class BeaconInfo(WireModel):
    """Status snapshot reported by a beacon."""
    id: str
    version: str
    ref_count: int = 0
    offer_count: int = 0
    uptime: float = Field(default=0, description="Seconds since the beacon started")
    dht: DhtStatus = Field(default_factory=DhtStatus)
