"""
models/reservation.py
---------------------
Domain model for a guest's stay at a property.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.property import Property


@dataclass
class Reservation:
    """
    Represents a single reservation.

    Attributes:
        start_date: First night of the stay.
        end_date: Checkout date.
        property_id: Reserved listing.
        guest_id: User who booked.
        listing: Reserved property with its average rating, when loaded by a listing query.
        id: Database primary key (None for new records).
    """
    start_date: date
    end_date: date
    property_id: int
    guest_id: int
    listing: Optional[Property] = None
    id: Optional[int] = None

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        return f"#{self.id} property {self.property_id}: {self.start_date} -> {self.end_date}"
