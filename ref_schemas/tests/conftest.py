"""
Shared fixtures.
"""
import pytest

from ref_schemas.config import reset_config
from ref_schemas.models import Offer, Ref


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test reads configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def car_ref() -> Ref:
    return Ref(
        id="ref-1",
        name="2020 Toyota Camry",
        description="One owner, garage kept",
        category="Vehicles",
        subcategory="Cars",
        image="https://example.com/camry.jpg",
        location_lat=37.77493,
        location_lng=-122.41942,
        location_address="1 Market St",
        location_city="San Francisco",
        location_state="CA",
        attributes={"year": 2020, "make": "Toyota", "model": "Camry", "mileage": 45000},
        condition="excellent",
        listing_status="for_sale",
        beacon_id="beacon-abc",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
    )


@pytest.fixture
def car_offer() -> Offer:
    return Offer(
        id="offer-1",
        ref_id="ref-1",
        price=25000,
        price_currency="USD",
        status="active",
        seller_id="beacon-abc",
        location="San Francisco, CA",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
    )
