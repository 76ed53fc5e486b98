"""Tests for the service layer error policy"""
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from errors import ConflictError, NotFoundError, StorageError, ValidationError
from models.property import Property
from models.search_options import PropertySearchOptions
from models.user import User
from services.property_service import PropertyService
from services.reservation_service import ReservationService
from services.user_service import UserService


LISTING = {
    "title": "Speed lamp",
    "description": "description",
    "cost_per_night": "93.61",
    "street": "536 Namsub Highway",
    "city": "Sotboske",
    "province": "Quebec",
    "post_code": "28142",
    "country": "Canada",
    "thumbnail_photo_url": "https://images.example/1-thumb.jpg",
    "cover_photo_url": "https://images.example/1-cover.jpg",
    "parking_spaces": "6",
    "number_of_bathrooms": "4",
    "number_of_bedrooms": "8",
}


class TestUserService:
    """Not-found and conflict handling for users"""

    def test_get_user_found(self):
        repo = MagicMock()
        repo.get_by_id.return_value = User(id=2, name="a", email="a@b.c", password="x")
        assert UserService(repo).get_user(2).id == 2

    def test_get_user_missing_raises_not_found(self):
        repo = MagicMock()
        repo.get_by_id.return_value = None
        with pytest.raises(NotFoundError) as exc:
            UserService(repo).get_user(99)
        assert exc.value.details == {"id": 99}

    def test_get_user_by_email_missing(self):
        repo = MagicMock()
        repo.get_by_email.return_value = None
        with pytest.raises(NotFoundError):
            UserService(repo).get_user_by_email("x@y.z")

    def test_storage_error_is_not_masked(self):
        repo = MagicMock()
        repo.get_by_id.side_effect = StorageError("connection lost")
        with pytest.raises(StorageError):
            UserService(repo).get_user(1)

    def test_register(self):
        repo = MagicMock()
        repo.add.side_effect = lambda u: User(id=5, name=u.name, email=u.email, password=u.password)
        user = UserService(repo).register(" Eva ", "eva@example.com", "hash")
        assert user.id == 5
        assert user.name == "Eva"

    def test_register_duplicate_email(self):
        repo = MagicMock()
        repo.add.return_value = None
        with pytest.raises(ConflictError):
            UserService(repo).register("Eva", "eva@example.com", "hash")

    def test_register_blank_fields(self):
        repo = MagicMock()
        with pytest.raises(ValidationError) as exc:
            UserService(repo).register("", "eva@example.com", "  ")
        assert exc.value.details["missing"] == ["name", "password"]
        repo.add.assert_not_called()


class TestPropertyService:
    """Listing search and creation"""

    def test_search_parses_raw_options(self):
        repo = MagicMock()
        repo.search.return_value = []
        PropertyService(repo).search({"city": "Van", "minimum_rating": "4", "owner_id": ""}, limit=3)
        repo.search.assert_called_once_with(
            PropertySearchOptions(city="Van", minimum_rating=Decimal("4")), 3
        )

    def test_owner_listings(self):
        repo = MagicMock()
        PropertyService(repo).get_owner_listings(8)
        repo.search.assert_called_once_with(PropertySearchOptions(owner_id=8), 10)

    def test_create_listing_converts_price(self):
        repo = MagicMock()
        repo.add.side_effect = lambda p: p
        prop = PropertyService(repo).create_listing(1, LISTING)
        assert isinstance(prop, Property)
        assert prop.cost_per_night == 9361
        assert prop.owner_id == 1
        assert prop.number_of_bedrooms == 8
        assert prop.parking_spaces == 6

    def test_create_listing_missing_fields(self):
        repo = MagicMock()
        data = dict(LISTING, title="", city=None)
        with pytest.raises(ValidationError) as exc:
            PropertyService(repo).create_listing(1, data)
        assert exc.value.details["missing"] == ["title", "city"]
        repo.add.assert_not_called()

    @pytest.mark.parametrize("cost", ["abc", "-5", "NaN", "sNaN", "Infinity", "-Infinity"])
    def test_create_listing_bad_price(self, cost):
        with pytest.raises(ValidationError):
            PropertyService(MagicMock()).create_listing(1, dict(LISTING, cost_per_night=cost))

    @pytest.mark.parametrize("count", ["two", 2.7, "2.5", -1, "-3", "NaN"])
    def test_create_listing_bad_count(self, count):
        repo = MagicMock()
        with pytest.raises(ValidationError):
            PropertyService(repo).create_listing(1, dict(LISTING, parking_spaces=count))
        repo.add.assert_not_called()

    def test_create_listing_blank_counts_default_to_zero(self):
        repo = MagicMock()
        repo.add.side_effect = lambda p: p
        data = dict(LISTING, parking_spaces="", number_of_bathrooms=None, number_of_bedrooms=3.0)
        prop = PropertyService(repo).create_listing(1, data)
        assert (prop.parking_spaces, prop.number_of_bathrooms, prop.number_of_bedrooms) == (0, 0, 3)


class TestReservationService:
    def test_delegates_to_repository(self):
        repo = MagicMock()
        repo.get_all_for_guest.return_value = []
        assert ReservationService(repo).get_reservations(1, limit=2) == []
        repo.get_all_for_guest.assert_called_once_with(1, 2)
