"""Tests for the user and property stores."""

from rentalhaven.models.property import Property
from rentalhaven.models.user import User
from rentalhaven.repositories import PropertyRepository, UserRepository


def _property(owner: User, title: str = "Listing") -> Property:
    """Build an unsaved property for owner."""
    return Property(
        title=title,
        description="desc",
        price_per_night=10.0,
        price=300.0,
        city="Pune",
        state="Maharashtra",
        type="studio",
        owner=owner,
    )


class TestUserRepository:
    """Tests for the user store."""

    def test_create_assigns_id(self, test_db):
        """Test create assigns an id."""
        user = UserRepository(test_db).create(User(email="a@example.com", password="x"))
        assert user.id is not None

    def test_find_by_id(self, test_db, test_user):
        """Test find_by_id for existing and missing ids."""
        users = UserRepository(test_db)
        assert users.find_by_id(test_user.id).email == "owner@example.com"
        assert users.find_by_id(test_user.id + 100) is None

    def test_find_by_email_exact(self, test_db, test_user):
        """Test find_by_email matches exactly."""
        users = UserRepository(test_db)
        assert users.find_by_email("owner@example.com").id == test_user.id
        assert users.find_by_email("OWNER@EXAMPLE.COM") is None

    def test_find_first_and_count(self, test_db):
        """Test find_first returns the lowest id and count tracks inserts."""
        users = UserRepository(test_db)
        assert users.find_first() is None
        assert users.count() == 0

        first = users.create(User(email="first@example.com", password="x"))
        users.create(User(email="second@example.com", password="x"))
        assert users.find_first().id == first.id
        assert users.count() == 2


class TestPropertyRepository:
    """Tests for the property store."""

    def test_create_and_find(self, test_db, test_user):
        """Test a created property is found with its owner loaded."""
        properties = PropertyRepository(test_db)
        created = properties.create(_property(test_user))

        found = properties.find_by_id(created.id)
        assert found is not None
        assert found.owner.id == test_user.id
        assert properties.find_by_id(created.id + 1) is None

    def test_defaults(self, test_db, test_user):
        """Test column defaults for rating, review count and images."""
        created = PropertyRepository(test_db).create(_property(test_user))
        assert created.rating == 4.5
        assert created.review_count == 0
        assert created.images is None

    def test_create_all_and_find_all_in_order(self, test_db, test_user):
        """Test batch insert and insertion-ordered listing."""
        properties = PropertyRepository(test_db)
        batch = properties.create_all(_property(test_user, t) for t in ("a", "b", "c"))

        assert all(p.id is not None for p in batch)
        assert [p.title for p in properties.find_all()] == ["a", "b", "c"]
        assert properties.count() == 3

    def test_save_overwrites(self, test_db, test_user):
        """Test save overwrites fields without recomputing price."""
        properties = PropertyRepository(test_db)
        created = properties.create(_property(test_user))

        created.title = "Renamed"
        created.price_per_night = 20.0
        properties.save(created)

        reloaded = properties.find_by_id(created.id)
        assert reloaded.title == "Renamed"
        assert reloaded.price_per_night == 20.0
        # price is not recomputed on update
        assert reloaded.price == 300.0
