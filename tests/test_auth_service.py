import pytest

from hostel_allocation.core.exceptions import AuthenticationError, DuplicateEntryError
from hostel_allocation.repositories.seed import DEMO_USERS
from hostel_allocation.schemas.auth import LoginRequest, RegisterRequest
from hostel_allocation.schemas.common.enums import UserRole
from hostel_allocation.services.auth_service import AuthService, InMemorySessionStore


@pytest.fixture
def sessions():
    return InMemorySessionStore()


@pytest.fixture
def auth(sessions, settings):
    return AuthService(sessions, users=DEMO_USERS, settings=settings)


def test_login_stores_serialized_user(auth, sessions):
    token, user = auth.login(LoginRequest(email="student@example.com", password="password"))

    assert user.role == UserRole.STUDENT
    assert user.student_id == "STU001"
    assert '"email":"student@example.com"' in sessions.get(token)
    assert auth.get_current_user(token) == user


def test_login_email_is_case_insensitive(auth):
    _, user = auth.login(LoginRequest(email="Admin@Example.com", password="password"))

    assert user.is_admin


@pytest.mark.parametrize(
    "email, password",
    [("student@example.com", "wrong"), ("nobody@example.com", "password")],
)
def test_login_failures_share_one_message(auth, email, password):
    with pytest.raises(AuthenticationError) as exc_info:
        auth.login(LoginRequest(email=email, password=password))

    assert exc_info.value.message == "Invalid email or password"
    assert exc_info.value.status_code == 401


def test_register_then_login(auth):
    token, user = auth.register(RegisterRequest(
        name="New Student", email="new@example.com", password="password", student_id="STU777"
    ))

    assert auth.get_current_user(token) == user
    _, again = auth.login(LoginRequest(email="new@example.com", password="password"))
    assert again.id == user.id


def test_register_duplicate_email(auth):
    with pytest.raises(DuplicateEntryError):
        auth.register(RegisterRequest(name="Dup", email="admin@example.com", password="x"))


def test_logout_clears_session(auth):
    token, _ = auth.login(LoginRequest(email="admin@example.com", password="password"))

    auth.logout(token)

    assert auth.get_current_user(token) is None


def test_unknown_or_missing_token(auth):
    assert auth.get_current_user(None) is None
    assert auth.get_current_user("not-a-token") is None


def test_demo_users_are_not_shared_between_services(sessions, settings):
    first = AuthService(sessions, users=DEMO_USERS, settings=settings)
    second = AuthService(InMemorySessionStore(), users=DEMO_USERS, settings=settings)

    first.register(RegisterRequest(name="Only First", email="first@example.com", password="password"))

    with pytest.raises(AuthenticationError):
        second.login(LoginRequest(email="first@example.com", password="password"))
