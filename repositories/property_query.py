"""
repositories/property_query.py
------------------------------
Builds the parameterized property search statement.

Each present filter becomes a Predicate; row predicates are folded into
WHERE and aggregate predicates into HAVING, both joined with AND. Because
HAVING follows WHERE in the statement, appending predicates in filter order
keeps every %s placeholder aligned with its parameter.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from models.search_options import PropertySearchOptions, parse_decimal

BASE_SELECT = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON property_reviews.property_id = properties.id
"""

AVERAGE_RATING = "AVG(property_reviews.rating)"

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class Predicate:
    """One `column operator %s` condition and the value bound to it."""
    column: str
    operator: str
    value: Any
    aggregate: bool = False
    escape: Optional[str] = None

    def sql(self) -> str:
        clause = f"{self.column} {self.operator} %s"
        if self.escape is not None:
            clause += f" ESCAPE '{self.escape}'"
        return clause


def to_cents(amount: Decimal) -> int:
    """
    Convert a whole-currency amount to integer cents.

    Raises:
        ValidationError: If the amount is not a finite number.
    """
    cents = parse_decimal("amount", amount) * 100
    return int(cents.to_integral_value())


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so `text` only matches itself."""
    for ch in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(ch, LIKE_ESCAPE + ch)
    return text


def build_predicates(options: Optional[PropertySearchOptions]) -> list[Predicate]:
    """Return the predicates for every present filter, in fixed filter order."""
    if options is None:
        return []

    predicates: list[Predicate] = []
    if options.city is not None:
        predicates.append(
            Predicate("properties.city", "LIKE", f"%{escape_like(options.city)}%", escape=LIKE_ESCAPE)
        )
    if options.owner_id is not None:
        predicates.append(Predicate("properties.owner_id", "=", options.owner_id))
    if options.minimum_price_per_night is not None:
        predicates.append(
            Predicate("properties.cost_per_night", ">=", to_cents(options.minimum_price_per_night))
        )
    if options.maximum_price_per_night is not None:
        predicates.append(
            Predicate("properties.cost_per_night", "<=", to_cents(options.maximum_price_per_night))
        )
    if options.minimum_rating is not None:
        predicates.append(
            Predicate(AVERAGE_RATING, ">=", options.minimum_rating, aggregate=True)
        )
    return predicates


def build_search_query(
    options: Optional[PropertySearchOptions], limit: int
) -> tuple[str, list]:
    """
    Build the property search statement and its positional parameters.

    Args:
        options: Filters to apply; None or an empty options object means no filtering.
        limit: Maximum number of rows. Not validated.

    Returns:
        (sql, params) where params has one entry per present filter plus the limit.
    """
    predicates = build_predicates(options)
    row_preds = [p for p in predicates if not p.aggregate]
    agg_preds = [p for p in predicates if p.aggregate]

    sql = BASE_SELECT
    if row_preds:
        sql += "    WHERE " + " AND ".join(p.sql() for p in row_preds) + "\n"
    sql += "    GROUP BY properties.id\n"
    if agg_preds:
        sql += "    HAVING " + " AND ".join(p.sql() for p in agg_preds) + "\n"
    sql += "    ORDER BY properties.cost_per_night ASC, properties.id ASC\n"
    sql += "    LIMIT %s;"

    params = [p.value for p in row_preds] + [p.value for p in agg_preds] + [limit]
    return sql, params
