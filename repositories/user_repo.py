"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

import psycopg2

from db.connection import get_connection, release_connection, dict_cursor
from errors import StorageError
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a single user by primary key.

        Returns:
            A User or None if no row matches.

        Raises:
            StorageError: If the query fails.
        """
        sql = "SELECT * FROM users WHERE id = %s;"
        return self._fetch_one(sql, (user_id,), f"user #{user_id}")

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a single user by email.

        Returns:
            A User or None if no row matches.

        Raises:
            StorageError: If the query fails.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        return self._fetch_one(sql, (email,), f"user '{email}'")

    def add(self, user: User) -> Optional[User]:
        """
        Insert a user unless one with the same email already exists.
        The existence check and the insert run as one statement.

        Returns:
            The stored User with its `id` populated, or None if the email is taken.

        Raises:
            StorageError: If the insert fails.
        """
        sql = """
            INSERT INTO users (name, email, password)
            SELECT %s, %s, %s
            WHERE NOT EXISTS (SELECT 1 FROM users WHERE email = %s)
            RETURNING *;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (user.name, user.email, user.password, user.email))
                row = cur.fetchone()
            conn.commit()
            if row is None:
                logger.info(f"User '{user.email}' already registered, insert skipped")
                return None
            logger.info(f"Added user #{row['id']} ({user.email})")
            return User.from_row(row)
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to add user '{user.email}': {e}")
            raise StorageError(f"Failed to add user: {e}") from e
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_one(self, sql: str, params: tuple, what: str) -> Optional[User]:
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return User.from_row(row) if row else None
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch {what}: {e}")
            raise StorageError(f"Failed to fetch {what}: {e}") from e
        finally:
            release_connection(conn)
