"""
db/init_db.py
-------------
Creates the LightBnB schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users: hosts and guests share one table
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    email           VARCHAR(255) NOT NULL,
    password        VARCHAR(255) NOT NULL
);

-- Properties: listings owned by a user, cost stored in cents
CREATE TABLE IF NOT EXISTS properties (
    id                  SERIAL PRIMARY KEY,
    owner_id            INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    title               VARCHAR(255) NOT NULL,
    description         TEXT,
    thumbnail_photo_url VARCHAR(255) NOT NULL,
    cover_photo_url     VARCHAR(255) NOT NULL,
    cost_per_night      INTEGER NOT NULL DEFAULT 0,
    parking_spaces      INTEGER NOT NULL DEFAULT 0,
    number_of_bathrooms INTEGER NOT NULL DEFAULT 0,
    number_of_bedrooms  INTEGER NOT NULL DEFAULT 0,
    country             VARCHAR(255) NOT NULL,
    street              VARCHAR(255) NOT NULL,
    city                VARCHAR(255) NOT NULL,
    province            VARCHAR(255) NOT NULL,
    post_code           VARCHAR(255) NOT NULL,
    active              BOOLEAN NOT NULL DEFAULT TRUE
);

-- Reservations: a guest's stay at a property
CREATE TABLE IF NOT EXISTS reservations (
    id              SERIAL PRIMARY KEY,
    start_date      DATE NOT NULL,
    end_date        DATE NOT NULL,
    property_id     INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    guest_id        INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE
);

-- Reviews left by guests after a reservation
CREATE TABLE IF NOT EXISTS property_reviews (
    id              SERIAL PRIMARY KEY,
    guest_id        INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    property_id     INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    reservation_id  INTEGER NOT NULL REFERENCES reservations(id) ON DELETE CASCADE,
    rating          SMALLINT NOT NULL DEFAULT 0 CHECK (rating BETWEEN 0 AND 5),
    message         TEXT
);

CREATE INDEX IF NOT EXISTS idx_properties_owner ON properties(owner_id);
CREATE INDEX IF NOT EXISTS idx_properties_cost ON properties(cost_per_night);
CREATE INDEX IF NOT EXISTS idx_reservations_guest ON reservations(guest_id);
CREATE INDEX IF NOT EXISTS idx_reviews_property ON property_reviews(property_id);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    close_pool()
    print("Database schema created successfully.")
