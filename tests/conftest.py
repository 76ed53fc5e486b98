"""Shared fixtures: an in-process stand-in for psycopg2 connections"""
import pytest


class FakeCursor:
    """Records executed statements and serves queued rows."""

    def __init__(self, conn):
        self.conn = conn

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, list(params) if params is not None else None))
        if self.conn.error is not None:
            raise self.conn.error

    def fetchone(self):
        return self.conn.rows[0] if self.conn.rows else None

    def fetchall(self):
        return list(self.conn.rows)


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.rows = []
        self.error = None
        self.commits = 0
        self.rollbacks = 0
        self.cursor_kwargs = None

    def cursor(self, **kwargs):
        self.cursor_kwargs = kwargs
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakePool:
    def __init__(self):
        self.conn = FakeConnection()
        self.released = 0

    def get_connection(self):
        return self.conn

    def release_connection(self, conn):
        assert conn is self.conn
        self.released += 1


@pytest.fixture
def fake_db(monkeypatch):
    """Route every repository's connection handling to one FakeConnection"""
    fake = FakePool()
    for module in (
        "repositories.user_repo",
        "repositories.property_repo",
        "repositories.reservation_repo",
    ):
        monkeypatch.setattr(f"{module}.get_connection", fake.get_connection)
        monkeypatch.setattr(f"{module}.release_connection", fake.release_connection)
    return fake


@pytest.fixture
def property_row():
    return {
        "id": 7,
        "owner_id": 3,
        "title": "Garden flat",
        "description": "Quiet, near the park",
        "thumbnail_photo_url": "https://img.example/7-thumb.jpg",
        "cover_photo_url": "https://img.example/7-cover.jpg",
        "cost_per_night": 9300,
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "country": "Canada",
        "street": "12 Elm St",
        "city": "Toronto",
        "province": "Ontario",
        "post_code": "M4B 1B3",
        "active": True,
    }
