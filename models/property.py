"""
models/property.py
------------------
Domain model for rental listings.
"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class Property:
    """
    A rental listing.

    Attributes:
        owner_id: ID of the user who owns the listing.
        title: Listing headline.
        cost_per_night: Nightly price in cents.
        street, city, province, post_code, country: Address.
        thumbnail_photo_url / cover_photo_url: Photo links.
        parking_spaces, number_of_bathrooms, number_of_bedrooms: Counts.
        active: Whether the listing is visible (database default: True).
        average_rating: Mean review rating, only set on search results.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    thumbnail_photo_url: str
    cover_photo_url: str
    description: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    average_rating: Optional[float] = None
    id: Optional[int] = None

    # Columns written on insert, in statement order
    INSERT_COLUMNS = (
        "owner_id", "title", "description", "thumbnail_photo_url",
        "cover_photo_url", "cost_per_night", "street", "city", "province",
        "post_code", "country", "parking_spaces", "number_of_bathrooms",
        "number_of_bedrooms",
    )

    @classmethod
    def from_row(cls, row: dict) -> "Property":
        """Build a Property from a dict row, ignoring columns it does not know."""
        names = {f.name for f in fields(cls)}
        data = {k: v for k, v in row.items() if k in names}
        if data.get("average_rating") is not None:
            data["average_rating"] = float(data["average_rating"])
        return cls(**data)

    def insert_values(self) -> tuple:
        return tuple(getattr(self, col) for col in self.INSERT_COLUMNS)

    @property
    def price_per_night(self) -> float:
        """Nightly price in whole currency units."""
        return self.cost_per_night / 100

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - {self.price_per_night:.2f}/night"
