"""Tests for the sample data seeding routine."""

import random

import pytest

from rentalhaven.models.enums import PropertyType
from rentalhaven.models.property import Property
from rentalhaven.models.user import User
from rentalhaven.services.seed import (
    CATALOG,
    DEFAULT_IMAGE_URL,
    DEMO_OWNER_EMAIL,
    SEED_MESSAGE,
    annotate_description,
    image_for,
    seed_properties,
)

MUMBAI_APARTMENT_URL = (
    "https://images.unsplash.com/photo-1506744038136-46273834b3fb?auto=format&fit=crop&w=800&q=80"
)


class TestImageLookup:
    """Tests for the city/type image table."""

    def test_known_pair(self):
        """Test known pair."""
        assert image_for("Mumbai", "apartment") == MUMBAI_APARTMENT_URL

    def test_unknown_pair_uses_default(self):
        """Test unknown pair uses default."""
        assert image_for("Mumbai", "villa") == DEFAULT_IMAGE_URL
        assert DEFAULT_IMAGE_URL == (
            "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267"
            "?auto=format&fit=crop&w=800&q=80"
        )

    def test_lookup_is_exact(self):
        """Test lookup is exact."""
        assert image_for("mumbai", "apartment") == DEFAULT_IMAGE_URL
        assert image_for("Mumbai", "Apartment") == DEFAULT_IMAGE_URL

    def test_catalog_types_are_known(self):
        """Test catalog types are known."""
        known = {t.value for t in PropertyType}
        assert {entry.type for entry in CATALOG} <= known

    def test_every_catalog_entry_has_an_image(self):
        """Test every catalog entry has an image."""
        for entry in CATALOG:
            assert image_for(entry.city, entry.type) != DEFAULT_IMAGE_URL


def test_annotate_description():
    """Test annotate description."""
    assert (
        annotate_description("Spacious 2BHK.", 40000.0)
        == "Spacious 2BHK. Price: ₹40000.0 per month (INR)"
    )


class TestSeedProperties:
    """Tests for seed_properties against a database."""

    def test_creates_demo_owner_and_catalog(self, test_db):
        """Test creates demo owner and catalog."""
        message = seed_properties(test_db, random.Random(1))

        assert message == SEED_MESSAGE
        users = test_db.query(User).all()
        assert len(users) == 1
        owner = users[0]
        assert owner.email == DEMO_OWNER_EMAIL
        assert owner.name == "Demo Owner"
        # Demo owner password is stored as given, not hashed
        assert owner.password == "demo1234"

        properties = test_db.query(Property).all()
        assert len(properties) == len(CATALOG) == 20
        assert all(p.owner_id == owner.id for p in properties)

    def test_derived_fields(self, test_db):
        """Test derived fields."""
        seed_properties(test_db, random.Random(1))

        for p in test_db.query(Property).all():
            assert p.price == p.price_per_night * 30
            assert 4.2 <= p.rating < 4.9
            assert 5 <= p.review_count < 25
            assert p.description.endswith(f" Price: ₹{p.price_per_night} per month (INR)")
            assert p.images == image_for(p.city, p.type)

        mumbai = test_db.query(Property).filter(Property.city == "Mumbai").one()
        assert mumbai.title == "2BHK Apartment in Mumbai"
        assert mumbai.price_per_night == 40000.0
        assert mumbai.price == 1200000.0
        assert mumbai.images == MUMBAI_APARTMENT_URL

    def test_random_fields_follow_rng(self, test_db):
        """Test random fields follow rng."""
        seed_properties(test_db, random.Random(5))

        expected = random.Random(5)
        for p in test_db.query(Property).order_by(Property.id).all():
            assert p.rating == pytest.approx(4.2 + expected.random() * 0.7)
            assert p.review_count == 5 + int(expected.random() * 20)

    def test_uses_existing_user_as_owner(self, test_db, test_user):
        """Test uses existing user as owner."""
        seed_properties(test_db, random.Random(1))

        assert test_db.query(User).count() == 1
        assert {p.owner_id for p in test_db.query(Property).all()} == {test_user.id}

    def test_seeding_twice_duplicates_catalog(self, test_db):
        """Test seeding twice duplicates catalog."""
        seed_properties(test_db, random.Random(1))
        seed_properties(test_db, random.Random(2))

        assert test_db.query(User).count() == 1
        assert test_db.query(Property).count() == 2 * len(CATALOG)


class TestSeedEndpoint:
    """Tests for POST /api/seed."""

    def test_seed_endpoint(self, client):
        """Test seed endpoint."""
        response = client.post("/api/seed")
        assert response.status_code == 200
        assert response.json() == {"message": "Sample properties added."}

        listed = client.get("/api/properties").json()
        assert len(listed) == 20
        assert {p["owner"]["email"] for p in listed} == {DEMO_OWNER_EMAIL}
        assert all(p["price"] == p["pricePerNight"] * 30 for p in listed)

    def test_seed_endpoint_twice_doubles(self, client):
        """Test seed endpoint twice doubles."""
        client.post("/api/seed")
        client.post("/api/seed")
        assert len(client.get("/api/properties").json()) == 40

    def test_demo_owner_cannot_log_in(self, client):
        """Test demo owner cannot log in."""
        client.post("/api/seed")
        response = client.post(
            "/api/auth/login",
            json={"email": DEMO_OWNER_EMAIL, "password": "demo1234"},
        )
        assert response.status_code == 401
