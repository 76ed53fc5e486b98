"""
models/search_options.py
------------------------
Optional filters for a property search.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from errors import ValidationError


def parse_decimal(name: str, value: Any) -> Decimal:
    """
    Parse a finite decimal from request input.

    Raises:
        ValidationError: If the value is not a number, or is NaN/Infinity.
    """
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number", details={name: value})
    if not number.is_finite():
        raise ValidationError(f"{name} must be a finite number", details={name: value})
    return number


@dataclass(frozen=True)
class PropertySearchOptions:
    """
    Filters applied to a property search; every field is optional.

    Attributes:
        city: Case-sensitive substring of the property's city.
        owner_id: Only listings owned by this user.
        minimum_price_per_night: Lower price bound, whole currency units.
        maximum_price_per_night: Upper price bound, whole currency units.
        minimum_rating: Lower bound on the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Decimal] = None
    maximum_price_per_night: Optional[Decimal] = None
    minimum_rating: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "PropertySearchOptions":
        """
        Parse filters from a request mapping (query string or form values).

        Missing keys, None and blank strings all mean "filter absent".
        Non-blank values are kept as sent; a city of " den" matches " den".

        Raises:
            ValidationError: If a numeric filter is not a finite number.
        """
        raw = raw or {}

        def present(key: str):
            value = raw.get(key)
            if value is None or (isinstance(value, str) and not value.strip()):
                return None
            return value

        def number(key: str) -> Optional[Decimal]:
            value = present(key)
            return None if value is None else parse_decimal(key, value)

        owner_id = present("owner_id")
        if owner_id is not None:
            try:
                owner_id = int(str(owner_id).strip())
            except ValueError:
                raise ValidationError("owner_id must be an integer", details={"owner_id": owner_id})

        return cls(
            city=present("city"),
            owner_id=owner_id,
            minimum_price_per_night=number("minimum_price_per_night"),
            maximum_price_per_night=number("maximum_price_per_night"),
            minimum_rating=number("minimum_rating"),
        )

    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (
                self.city, self.owner_id, self.minimum_price_per_night,
                self.maximum_price_per_night, self.minimum_rating,
            )
        )
