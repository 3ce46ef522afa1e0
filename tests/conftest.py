import os

import pytest
from alembic import command
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from hrapp.main import app
from hrapp.db.session import get_db
from tests.helpers import alembic_config, clear_employees


@pytest.fixture(scope="session")
def database_url():
    """
    TEST_DATABASE_URL if set, otherwise a throwaway postgres:17-alpine
    container. Database tests are skipped when neither is available.
    """
    url = os.getenv("TEST_DATABASE_URL")
    if url:
        yield url
        return

    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer(
        "postgres:17-alpine",
        username="hr_test",
        password="hr_test_password",
        dbname="hrdb_test",
        driver="psycopg",
    )
    try:
        container.start()
    except Exception as exc:  # no Docker daemon, image pull failure, ...
        pytest.skip(f"PostgreSQL test container unavailable: {exc}")
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture(scope="session")
def engine(database_url):
    """
    Engine on a database migrated to head, with the sample rows from
    migration 0002 removed so each test seeds its own fixtures.
    """
    eng = create_engine(database_url, pool_pre_ping=True)
    cfg = alembic_config(database_url)
    command.upgrade(cfg, "head")
    clear_employees(eng)
    yield eng
    command.downgrade(cfg, "base")
    eng.dispose()


@pytest.fixture()
def db_session(engine):
    """
    Uses:
      - one outer transaction per test
      - a SAVEPOINT for every session-level transaction inside it

    Application code can call session.commit() or session.rollback() freely;
    both only end the current SAVEPOINT and everything is discarded when the
    outer transaction rolls back.
    """
    connection = engine.connect()
    outer_tx = connection.begin()

    TestingSessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        join_transaction_mode="create_savepoint",
    )
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        outer_tx.rollback()
        connection.close()


@pytest.fixture()
def client(db_session):
    # Tests that hit a database error roll the session back themselves.
    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override
    yield TestClient(app)
    app.dependency_overrides.clear()
