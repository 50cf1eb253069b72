import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from imageupload.config import Settings, get_settings
from imageupload.database import build_engine, create_db_and_tables, get_session
from imageupload.main import app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    create_db_and_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        UPLOAD_DIR=str(tmp_path / "uploads"),
        IMAGE_STORAGE_MODE="inline",
        BASE_URL="http://testserver",
    )


@pytest.fixture
def client(engine, app_settings):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_settings] = lambda: app_settings
    # No context manager: the lifespan would create tables in the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def filesystem_client(client, app_settings):
    app_settings.IMAGE_STORAGE_MODE = "filesystem"
    return client


@pytest.fixture
def make_customer(client):
    def _make(first_name="Ada", last_name="Lovelace", **extra):
        payload = {"firstName": first_name, "lastName": last_name, **extra}
        response = client.post("/customers", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]["id"]

    return _make
