"""
services/property_service.py
-----------------------------
Business logic for searching and creating listings.
"""

from typing import Any, Mapping, Optional

from config import DEFAULT_RESULT_LIMIT
from errors import ValidationError
from models.property import Property
from models.search_options import PropertySearchOptions, parse_decimal
from repositories.property_query import to_cents
from repositories.property_repo import PropertyRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_REQUIRED_FIELDS = (
    "title", "cost_per_night", "street", "city", "province",
    "post_code", "country", "thumbnail_photo_url", "cover_photo_url",
)
_COUNT_FIELDS = ("parking_spaces", "number_of_bathrooms", "number_of_bedrooms")


class PropertyService:
    """Parses request data for the property repository."""

    def __init__(self, repo: PropertyRepository | None = None):
        self.repo = repo or PropertyRepository()

    def search(
        self,
        raw_options: Optional[Mapping[str, Any]] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """Search listings from raw request filters."""
        options = PropertySearchOptions.from_dict(raw_options)
        return self.repo.search(options, limit)

    def get_owner_listings(self, owner_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Property]:
        """All listings of one owner, cheapest first."""
        return self.repo.search(PropertySearchOptions(owner_id=owner_id), limit)

    def create_listing(self, owner_id: int, data: Mapping[str, Any]) -> Property:
        """
        Create a listing for an owner.

        Args:
            owner_id: ID of the owning user.
            data: Listing fields; `cost_per_night` in whole currency units.

        Returns:
            The stored Property.

        Raises:
            ValidationError: If a required field is missing or a number is malformed.
        """
        missing = [f for f in _REQUIRED_FIELDS if data.get(f) in (None, "")]
        if missing:
            raise ValidationError("Missing required fields", details={"missing": missing})

        cost = parse_decimal("cost_per_night", data["cost_per_night"])
        if cost < 0:
            raise ValidationError("cost_per_night must not be negative", details={"cost_per_night": str(cost)})

        counts = {f: self._parse_count(f, data.get(f)) for f in _COUNT_FIELDS}

        prop = Property(
            owner_id=owner_id,
            title=data["title"],
            description=data.get("description"),
            cost_per_night=to_cents(cost),
            street=data["street"],
            city=data["city"],
            province=data["province"],
            post_code=data["post_code"],
            country=data["country"],
            thumbnail_photo_url=data["thumbnail_photo_url"],
            cover_photo_url=data["cover_photo_url"],
            **counts,
        )
        return self.repo.add(prop)

    @staticmethod
    def _parse_count(name: str, value: Any) -> int:
        """Parse a room/parking count; blank means 0, fractions and negatives are rejected."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        number = parse_decimal(name, value)
        if number != number.to_integral_value() or number < 0:
            raise ValidationError(f"{name} must be a non-negative integer", details={name: value})
        return int(number)
