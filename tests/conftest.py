"""Shared test fixtures."""

import sqlite3

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event

from catalog_api.core.config import Settings
from catalog_api.main import create_app



@pytest.fixture
def db_path(tmp_path):
    """Path of a throwaway SQLite database file."""
    return tmp_path / "catalog.db"


@pytest.fixture
def app(db_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        environment="test",
        api_prefix="/api",
    )
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the lifespan running, so tables exist."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed(client, db_path):
    """Insert rows straight into the store, bypassing the API."""

    def _seed(table, rows):
        connection = sqlite3.connect(db_path)
        try:
            for row in rows:
                columns = ", ".join(row)
                placeholders = ", ".join("?" for _ in row)
                connection.execute(
                    f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
                    list(row.values()),
                )
            connection.commit()
        finally:
            connection.close()

    return _seed


@pytest.fixture
def executed_statements(client, app):
    """Collect every SQL statement the app sends to the store."""
    statements = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append(" ".join(statement.split()))

    sync_engine = app.state.engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", _record)
    yield statements
    event.remove(sync_engine, "before_cursor_execute", _record)


@pytest.fixture
def catalog(seed):
    """Three products, two with images, one with comments."""
    seed("products", [
        {"product_id": "p1", "title": "Desk lamp", "description": "Warm light", "price": 25.0},
        {"product_id": "p2", "title": "Floor lamp", "description": "Tall and bright", "price": 80.0},
        {"product_id": "p3", "title": "Bookshelf", "description": "Oak wood", "price": 150.0},
    ])
    seed("images", [
        {"image_id": "i1", "url": "https://img.example.com/a.jpg", "product_id": "p1", "main": 0},
        {"image_id": "i2", "url": "https://img.example.com/b.jpg", "product_id": "p1", "main": 1},
        {"image_id": "i3", "url": "https://img.example.com/c.jpg", "product_id": "p2", "main": 0},
    ])
    seed("comments", [
        {"comment_id": "c1", "name": "Ann", "email": "ann@example.com", "body": "Great", "product_id": "p1"},
        {"comment_id": "c2", "name": "Bob", "email": "bob@example.com", "body": "Fine", "product_id": "p1"},
    ])
    return ["p1", "p2", "p3"]
