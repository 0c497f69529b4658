import pytest
from fastapi.testclient import TestClient

from hostel_allocation.config.settings import Settings
from hostel_allocation.db.init_db import drop_db, init_db
from hostel_allocation.db.session import build_engine, build_session_factory
from hostel_allocation.main import create_app
from hostel_allocation.repositories.memory import InMemoryApplicationStore, InMemoryRoomStore
from hostel_allocation.repositories.sql_repository import SqlApplicationStore, SqlRoomStore
from hostel_allocation.schemas.application import ApplicationCreate
from hostel_allocation.schemas.common.enums import Block, RoomType
from hostel_allocation.services.allocation_service import AllocationService


@pytest.fixture
def settings():
    return Settings(ENVIRONMENT="test", SEED_DEMO_DATA=False, DATABASE_URL=None, LOG_FILE=None)


@pytest.fixture
def application_store():
    return InMemoryApplicationStore()


@pytest.fixture
def room_store():
    return InMemoryRoomStore()


@pytest.fixture
def service(application_store, room_store, settings):
    return AllocationService(application_store, room_store, settings)


@pytest.fixture
def session_factory(settings):
    engine = build_engine("sqlite://", echo=False)
    init_db(engine)
    yield build_session_factory(settings, engine=engine)
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def sql_application_store(session_factory):
    return SqlApplicationStore(session_factory)


@pytest.fixture
def sql_room_store(session_factory):
    return SqlRoomStore(session_factory)


@pytest.fixture
def form():
    """A valid Block A / Single application form."""
    return ApplicationCreate(
        name="Asha Rao",
        student_id="STU042",
        department_name="Computer Science",
        year="2nd",
        cgpa=3.4,
        room_type=RoomType.SINGLE,
        preferred_block=Block.A,
    )


@pytest.fixture
def app():
    demo_settings = Settings(ENVIRONMENT="test", SEED_DEMO_DATA=True, DATABASE_URL=None, LOG_FILE=None)
    return create_app(demo_settings, configure_logging=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _login(client, email):
    response = client.post("/api/v1/auth/login", json={"email": email, "password": "password"})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def admin_headers(client):
    return _login(client, "admin@example.com")


@pytest.fixture
def student_headers(client):
    return _login(client, "student@example.com")
