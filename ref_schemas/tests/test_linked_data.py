"""
Tests for JSON-LD assembly.
"""
import pytest
from pydantic import ValidationError

from ref_schemas.models import Offer
from ref_schemas.linked_data import (
    BaseFields,
    base_fields_from,
    build_ref_linked_data,
    build_schema_org_ld,
)


class TestBuildSchemaOrgLD:
    """Tests for build_schema_org_ld."""

    def test_car_end_to_end(self):
        """Car attributes plus name and price produce a complete record."""
        ld = build_schema_org_ld(
            "Vehicles",
            "Cars",
            {"year": 2020, "make": "Toyota", "model": "Camry", "mileage": 45000},
            {"name": "2020 Toyota Camry", "price": 25000},
        )

        assert ld["@type"] == "Car"
        assert ld["vehicleModelDate"] == "2020"
        assert ld["brand"] == {"@type": "Brand", "name": "Toyota"}
        assert ld["mileageFromOdometer"]["value"] == 45000
        assert ld["name"] == "2020 Toyota Camry"
        assert ld["offers"] == {"@type": "Offer", "price": 25000, "priceCurrency": "USD"}

    def test_context_always_present(self):
        ld = build_schema_org_ld(None, None, {}, {})

        assert ld == {
            "@type": "Product",
            "@context": {"@vocab": "https://schema.org/", "reffo": "https://reffo.ai/ns/"},
        }

    def test_zero_accidents_omitted(self):
        ld = build_schema_org_ld("Vehicles", "Cars", {"accidents": 0}, {})

        assert "knownVehicleDamages" not in ld

    def test_zero_price_kept(self):
        ld = build_schema_org_ld(None, None, {}, {"price": 0})

        assert ld["offers"]["price"] == 0
        assert ld["offers"]["priceCurrency"] == "USD"

    def test_no_price_no_offer(self):
        ld = build_schema_org_ld(None, None, {}, {"price": None, "sellerId": "beacon-1"})

        assert "offers" not in ld

    def test_condo_branching(self):
        condo = build_schema_org_ld("Housing", "Condos", {"property_type": "condo"}, {})
        house = build_schema_org_ld("Housing", "Condos", {"property_type": "single_family"}, {})

        assert condo["@type"] == "Apartment"
        assert house["@type"] == "SingleFamilyResidence"

    def test_full_offer(self):
        ld = build_schema_org_ld(None, None, {}, {
            "price": 120.5,
            "currency": "EUR",
            "offerStatus": "active",
            "sellerId": "beacon-xyz",
            "offerLocation": "Berlin",
        })

        assert ld["offers"] == {
            "@type": "Offer",
            "price": 120.5,
            "priceCurrency": "EUR",
            "availability": "active",
            "seller": {"@type": "Organization", "@id": "beacon-xyz"},
            "availableAtOrFrom": "Berlin",
        }

    def test_base_fields_mapping(self):
        ld = build_schema_org_ld("Other", "Services", {}, {
            "name": "Gift card",
            "description": "$50 at Joe's",
            "image": "https://example.com/card.png",
            "sku": "GC-50",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-02-01T00:00:00Z",
            "condition": "new",
        })

        assert ld["name"] == "Gift card"
        assert ld["description"] == "$50 at Joe's"
        assert ld["image"] == "https://example.com/card.png"
        assert ld["sku"] == "GC-50"
        assert ld["dateCreated"] == "2024-01-01T00:00:00Z"
        assert ld["dateModified"] == "2024-02-01T00:00:00Z"
        assert ld["reffo:condition"] == "new"
        assert "condition" not in ld

    def test_snake_case_keys_accepted(self):
        ld = build_schema_org_ld(None, None, {}, {"created_at": "2024-01-01", "price": 5, "seller_id": "b1"})

        assert ld["dateCreated"] == "2024-01-01"
        assert ld["offers"]["seller"]["@id"] == "b1"

    def test_empty_strings_omitted(self):
        ld = build_schema_org_ld(None, None, {}, {"name": "", "description": "", "currency": "", "price": 1})

        assert "name" not in ld
        assert "description" not in ld
        assert ld["offers"]["priceCurrency"] == "USD"

    def test_base_fields_override_builder_keys(self):
        """The ref's own name and createdAt win over the artwork title and year."""
        ld = build_schema_org_ld(
            "Collectibles",
            "Art",
            {"title": "Harbor at Dawn", "year_created": 2023},
            {"name": "Original oil painting", "createdAt": "2024-03-01T00:00:00Z"},
        )

        assert ld["name"] == "Original oil painting"
        assert ld["dateCreated"] == "2024-03-01T00:00:00Z"

    def test_builder_keys_kept_when_base_field_missing(self):
        ld = build_schema_org_ld("Collectibles", "Art", {"title": "Harbor at Dawn"}, {})

        assert ld["name"] == "Harbor at Dawn"

    def test_idempotent(self):
        args = ("Electronics", "Phones & Tablets", {"storage_gb": 256, "network": "5G"}, {"price": 800})

        assert build_schema_org_ld(*args) == build_schema_org_ld(*args)

    def test_inputs_not_mutated(self):
        attrs = {"make": "Toyota"}
        base = {"name": "Car", "price": 1}

        build_schema_org_ld("Vehicles", "Cars", attrs, base)

        assert attrs == {"make": "Toyota"}
        assert base == {"name": "Car", "price": 1}

    def test_none_inputs(self):
        ld = build_schema_org_ld("Vehicles", "Cars", None, None)

        assert ld["@type"] == "Car"

    def test_accepts_base_fields_model(self):
        ld = build_schema_org_ld(None, None, {}, BaseFields(name="Lamp", price=0))

        assert ld["name"] == "Lamp"
        assert ld["offers"]["price"] == 0

    def test_invalid_base_field_type(self):
        with pytest.raises(ValidationError):
            build_schema_org_ld(None, None, {}, {"price": "free"})

    def test_configured_currency_and_namespace(self, monkeypatch):
        monkeypatch.setenv("REFFO_DEFAULT_CURRENCY", "SEK")
        monkeypatch.setenv("REFFO_NAMESPACE_URL", "https://example.org/ns/")

        ld = build_schema_org_ld(None, None, {}, {"price": 100})

        assert ld["offers"]["priceCurrency"] == "SEK"
        assert ld["@context"]["reffo"] == "https://example.org/ns/"


class TestRefLinkedData:
    """Tests for building JSON-LD from stored records."""

    def test_base_fields_from_ref_only(self, car_ref):
        fields = base_fields_from(car_ref)

        assert fields.name == "2020 Toyota Camry"
        assert fields.condition == "excellent"
        assert fields.price is None

    def test_base_fields_from_ref_and_offer(self, car_ref, car_offer):
        fields = base_fields_from(car_ref, car_offer)

        assert fields.price == 25000
        assert fields.currency == "USD"
        assert fields.offer_status == "active"
        assert fields.seller_id == "beacon-abc"
        assert fields.offer_location == "San Francisco, CA"

    def test_build_ref_linked_data(self, car_ref, car_offer):
        ld = build_ref_linked_data(car_ref, car_offer)

        assert ld["@type"] == "Car"
        assert ld["brand"]["name"] == "Toyota"
        assert ld["name"] == "2020 Toyota Camry"
        assert ld["reffo:condition"] == "excellent"
        assert ld["dateCreated"] == "2024-01-01T00:00:00Z"
        assert ld["offers"]["seller"] == {"@type": "Organization", "@id": "beacon-abc"}
        assert "locationAddress" not in ld

    def test_ref_without_offer_has_no_offers(self, car_ref):
        assert "offers" not in build_ref_linked_data(car_ref)

    def test_default_offer_status_exported_as_string(self, car_ref):
        """An offer created without a status still exports availability as a plain string."""
        offer = Offer(
            id="offer-2",
            ref_id="ref-1",
            price=19000,
            price_currency="USD",
            seller_id="beacon-abc",
            created_at="2024-01-01T00:00:00Z",
            updated_at="2024-01-01T00:00:00Z",
        )

        availability = build_ref_linked_data(car_ref, offer)["offers"]["availability"]

        assert availability == "active"
        assert type(availability) is str
