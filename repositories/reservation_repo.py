"""
repositories/reservation_repo.py
--------------------------------
Data access layer for reservations.
"""

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import get_connection, release_connection, dict_cursor
from errors import StorageError
from models.property import Property
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for reads on the reservations table."""

    def get_all_for_guest(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        """
        Fetch a guest's completed reservations, each with its property and
        that property's average rating.

        Args:
            guest_id: The guest's user ID.
            limit: Maximum number of reservations.

        Returns:
            List of Reservation objects ordered by start date.

        Raises:
            StorageError: If the query fails.
        """
        sql = """
            SELECT properties.*,
                   reservations.id AS reservation_id,
                   reservations.start_date,
                   reservations.end_date,
                   reservations.guest_id,
                   AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON property_reviews.property_id = properties.id
            WHERE reservations.guest_id = %s
              AND reservations.end_date < now()::date
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date ASC
            LIMIT %s;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (guest_id, limit))
                return [self._row_to_reservation(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch reservations for guest {guest_id}: {e}")
            raise StorageError(f"Failed to fetch reservations: {e}") from e
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_reservation(row: dict) -> Reservation:
        """Split a joined row into a Reservation and its Property."""
        listing = Property.from_row(row)
        return Reservation(
            id=row["reservation_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            property_id=listing.id,
            guest_id=row["guest_id"],
            listing=listing,
        )
