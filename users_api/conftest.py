import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from users_api.database.engine import ConnectionPool, init_schema
from users_api.database.models import users
from users_api.server import create_app
from users_api.settings import Settings


@pytest.fixture
def app_settings():
    return Settings(_env_file=None)


@pytest.fixture
def pool(tmp_path):
    engine = create_engine(
        f'sqlite:///{tmp_path / "users.db"}',
        connect_args={'check_same_thread': False},
    )
    pool = ConnectionPool(engine)
    init_schema(pool)
    yield pool
    pool.close()


@pytest.fixture
def client(pool, app_settings):
    app = create_app(pool, app_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def drop_users_table(pool):
    """Break the store so every statement against users fails."""

    def drop():
        with pool.engine.begin() as conn:
            users.drop(conn)

    return drop
