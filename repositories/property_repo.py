"""
repositories/property_repo.py
-----------------------------
Data access layer for rental listings.
All SQL queries related to the `properties` table live here.
"""

from typing import Optional

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import get_connection, release_connection, dict_cursor
from errors import StorageError
from models.property import Property
from models.search_options import PropertySearchOptions
from repositories.property_query import build_search_query
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository:
    """Repository for searches and inserts on the properties table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new listing.

        Args:
            prop: The Property to persist; `cost_per_night` in cents.

        Returns:
            The stored Property as returned by the database (id and active set).

        Raises:
            StorageError: If the insert fails (e.g. unknown owner).
        """
        columns = ", ".join(Property.INSERT_COLUMNS)
        placeholders = ", ".join(["%s"] * len(Property.INSERT_COLUMNS))
        sql = f"INSERT INTO properties ({columns}) VALUES ({placeholders}) RETURNING *;"

        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, prop.insert_values())
                row = cur.fetchone()
            conn.commit()
            stored = Property.from_row(row)
            logger.info(f"Added property #{stored.id} '{stored.title}' for owner {stored.owner_id}")
            return stored
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise StorageError(f"Failed to add property: {e}") from e
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def search(
        self,
        options: Optional[PropertySearchOptions] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Search listings with their average rating, cheapest first.

        Args:
            options: Filters; every present filter must match.
            limit: Maximum number of rows.

        Returns:
            List of Property objects with `average_rating` set (None if unreviewed).

        Raises:
            StorageError: If the query fails.
        """
        sql, params = build_search_query(options, limit)
        logger.debug(f"Property search {options} -> {params}")

        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                return [Property.from_row(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Property search failed: {e}")
            raise StorageError(f"Property search failed: {e}") from e
        finally:
            release_connection(conn)
