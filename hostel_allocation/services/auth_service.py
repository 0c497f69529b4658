"""
Demo authentication stub.

There are no password hashes: every demo account logs in with the
configured DEMO_PASSWORD. The logged-in user is kept in a SessionStore as
a serialized JSON record keyed by an opaque bearer token.
"""

import secrets
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from hostel_allocation.config.logging import get_logger
from hostel_allocation.config.settings import Settings, settings as default_settings
from hostel_allocation.core.exceptions import AuthenticationError, DuplicateEntryError
from hostel_allocation.schemas.auth import LoginRequest, RegisterRequest, User

logger = get_logger(__name__)


class SessionStore(ABC):
    """Get/set/clear a serialized user record per session token."""

    @abstractmethod
    def get(self, token: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, token: str, serialized_user: str) -> None:
        ...

    @abstractmethod
    def clear(self, token: str) -> None:
        ...


class InMemorySessionStore(SessionStore):

    def __init__(self) -> None:
        self._sessions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> Optional[str]:
        with self._lock:
            return self._sessions.get(token)

    def set(self, token: str, serialized_user: str) -> None:
        with self._lock:
            self._sessions[token] = serialized_user

    def clear(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)


class AuthService:
    """Login, registration and session lookup for the demo accounts."""

    INVALID_CREDENTIALS = "Invalid email or password"

    def __init__(
        self,
        session_store: SessionStore,
        users: Optional[Iterable[User]] = None,
        settings: Optional[Settings] = None,
    ):
        self.sessions = session_store
        self.settings = settings or default_settings
        self._users: List[User] = [user.model_copy() for user in (users or [])]
        self._lock = threading.Lock()

    def _find_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self._users if u.email.lower() == email), None)

    def _open_session(self, user: User) -> str:
        token = secrets.token_urlsafe(32)
        self.sessions.set(token, user.model_dump_json())
        return token

    def login(self, credentials: LoginRequest) -> Tuple[str, User]:
        """
        Start a session for a demo account.

        Raises:
            AuthenticationError: unknown email or wrong password
        """
        user = self._find_by_email(credentials.email)
        if user is None or credentials.password != self.settings.DEMO_PASSWORD:
            logger.warning("Login failed", extra={"user_id": user.id if user else None})
            raise AuthenticationError(self.INVALID_CREDENTIALS)

        token = self._open_session(user)
        logger.info(f"User {user.id} logged in", extra={"user_id": user.id})
        return token, user

    def register(self, data: RegisterRequest) -> Tuple[str, User]:
        """
        Create an account and log it in.

        Raises:
            DuplicateEntryError: the email is already registered
        """
        with self._lock:
            if self._find_by_email(data.email) is not None:
                raise DuplicateEntryError(
                    "User with this email already exists", details={"email": data.email}
                )
            user = User(
                id=str(uuid.uuid4()),
                name=data.name,
                email=data.email,
                role=data.role,
                student_id=data.student_id,
            )
            self._users.append(user)

        token = self._open_session(user)
        logger.info(f"User {user.id} registered", extra={"user_id": user.id})
        return token, user

    def logout(self, token: str) -> None:
        self.sessions.clear(token)

    def get_current_user(self, token: Optional[str]) -> Optional[User]:
        if not token:
            return None
        serialized = self.sessions.get(token)
        if serialized is None:
            return None
        return User.model_validate_json(serialized)
