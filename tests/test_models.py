"""Tests for the entity model and identity equality."""

import pytest
from pydantic import ValidationError

from core.domain.models import (
    Client,
    ConsultationOrder,
    MedicationItem,
    MedicationKind,
    Pet,
    antibiotic,
    antiparasitic,
    default_catalog,
    generic_medication,
    identity_equals,
    vaccine,
)
from core.interfaces.identity import IdentityComparable


class TestClientIdentity:
    def test_phone_is_ignored_by_equality_and_hash(self):
        a = Client(name="Ana", email="ana@x.com", phone="111")
        b = Client(name="Ana", email="ana@x.com", phone="222")
        assert a == b
        assert hash(a) == hash(b)
        assert identity_equals(a, b)

    def test_different_email_is_a_different_client(self):
        a = Client(name="Ana", email="ana@x.com")
        b = Client(name="Ana", email="ana@y.com")
        assert a != b
        assert not identity_equals(a, b)

    def test_client_is_immutable(self, client):
        with pytest.raises(ValidationError):
            client.phone = "333"


class TestMedicationIdentity:
    def test_price_stock_and_tag_are_ignored(self):
        tagged = antibiotic(name="Amoxicilina", dosage="500mg", price=15000.0, stock=50)
        plain = generic_medication("Amoxicilina", "500mg", 9999.0, stock=1)
        assert tagged == plain
        assert hash(tagged) == hash(plain)

    def test_dosage_is_part_of_identity(self):
        assert antibiotic(dosage="500mg") != antibiotic(dosage="250mg")

    def test_client_and_medication_never_identity_equal(self):
        client = Client(name="x", email="y")
        med = generic_medication("x", "y", 1.0)
        assert not identity_equals(client, med)
        assert client != med


class TestPromotionalTags:
    @pytest.mark.parametrize(
        "factory, kind, fraction",
        [
            (antibiotic, MedicationKind.ANTIBIOTIC, 0.20),
            (antiparasitic, MedicationKind.ANTIPARASITIC, 0.15),
            (vaccine, MedicationKind.VACCINE, 0.10),
        ],
    )
    def test_canonical_variants(self, factory, kind, fraction):
        item = factory()
        assert item.kind is kind
        assert item.is_promotional
        assert item.discount_fraction == pytest.approx(fraction)

    def test_generic_item_has_zero_discount(self):
        item = generic_medication("Meloxicam", "1.5mg/ml", 8000.0)
        assert not item.is_promotional
        assert item.discount_fraction == 0.0

    def test_zero_tag_is_not_promotional(self):
        item = MedicationItem(name="Suero", dosage="500ml", price=3000.0, promotion_discount=0.0)
        assert not item.is_promotional
        assert item.discount_fraction == 0.0

    def test_tag_outside_unit_interval_is_rejected(self):
        with pytest.raises(ValidationError):
            MedicationItem(name="x", dosage="y", price=1.0, promotion_discount=1.5)

    def test_catalog_defaults(self):
        catalog = default_catalog()
        assert [m.name for m in catalog[:3]] == ["Amoxicilina", "Ivermectina", "Vacuna Triple"]
        assert catalog[0].price == 15000.0


class TestValueConstraints:
    def test_pet_is_structural(self):
        assert Pet(name="A", species="Cat", age=1, weight=2.0) == Pet(name="A", species="Cat", age=1, weight=2.0)
        assert Pet(name="A", species="Cat", age=1, weight=2.0) != Pet(name="A", species="Cat", age=2, weight=2.0)

    @pytest.mark.parametrize("field, value", [("age", -1), ("weight", 0.0)])
    def test_pet_rejects_invalid_numbers(self, field, value):
        data = {"name": "A", "species": "Cat", "age": 1, "weight": 1.0, field: value}
        with pytest.raises(ValidationError):
            Pet(**data)

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            generic_medication("x", "y", -1.0)

    def test_order_total_cannot_be_negative(self, client, pet):
        with pytest.raises(ValidationError):
            ConsultationOrder(id=1000, client=client, pet=pet, created_at="2024-01-01T00:00:00", total=-1)


class TestIdentityProtocol:
    def test_entities_with_identity_key_satisfy_protocol(self, client, amoxicillin, pet):
        assert isinstance(client, IdentityComparable)
        assert isinstance(amoxicillin, IdentityComparable)
        assert not isinstance(pet, IdentityComparable)
