"""
services/user_service.py
-------------------------
Business logic for user lookup and registration.
"""

from errors import ConflictError, NotFoundError, ValidationError
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Turns absent users and duplicate emails into typed errors."""

    def __init__(self, repo: UserRepository | None = None):
        self.repo = repo or UserRepository()

    def get_user(self, user_id: int) -> User:
        """Get a user by ID or raise NotFoundError."""
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User #{user_id} not found", details={"id": user_id})
        return user

    def get_user_by_email(self, email: str) -> User:
        """Get a user by email or raise NotFoundError."""
        user = self.repo.get_by_email(email)
        if user is None:
            raise NotFoundError(f"No user with email {email}", details={"email": email})
        return user

    def register(self, name: str, email: str, password: str) -> User:
        """
        Register a new user.

        Args:
            name: Display name.
            email: Login email; must not be registered yet.
            password: Already-hashed password.

        Raises:
            ValidationError: If any field is blank.
            ConflictError: If the email is already registered.
        """
        missing = [k for k, v in (("name", name), ("email", email), ("password", password)) if not v or not str(v).strip()]
        if missing:
            raise ValidationError("Missing required fields", details={"missing": missing})

        user = self.repo.add(User(name=name.strip(), email=email.strip(), password=password))
        if user is None:
            logger.warning(f"Registration rejected, email already in use: {email}")
            raise ConflictError(f"Email {email} is already registered", details={"email": email})
        return user
