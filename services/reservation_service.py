"""
services/reservation_service.py
--------------------------------
Business logic for a guest's reservation history.
"""

from config import DEFAULT_RESULT_LIMIT
from models.reservation import Reservation
from repositories.reservation_repo import ReservationRepository


class ReservationService:
    """Reads reservations on behalf of a guest."""

    def __init__(self, repo: ReservationRepository | None = None):
        self.repo = repo or ReservationRepository()

    def get_reservations(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        return self.repo.get_all_for_guest(guest_id, limit)
