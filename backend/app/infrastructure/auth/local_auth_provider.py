"""In-process auth backend issuing anonymous identities to opaque tokens."""

import logging
import secrets
import threading
from uuid import uuid4

from app.application.interfaces import AuthProvider
from app.domain.entities import Identity
from app.infrastructure.auth.session import AuthSession

logger = logging.getLogger(__name__)


class LocalIdentityStore:
    """Process-wide token → identity map. Lost on restart."""

    def __init__(self) -> None:
        self._identities: dict[str, Identity] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> Identity | None:
        with self._lock:
            return self._identities.get(token)

    def issue(self) -> tuple[str, Identity]:
        token = secrets.token_urlsafe(32)
        identity = Identity(id=str(uuid4()), is_anonymous=True)
        with self._lock:
            self._identities[token] = identity
        return token, identity

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._identities.pop(token, None) is not None


class LocalAuthProvider(AuthProvider):
    """Implements the AuthProvider port against a LocalIdentityStore."""

    def __init__(self, store: LocalIdentityStore, session: AuthSession):
        self._store = store
        self._session = session

    async def get_current_identity(self) -> Identity | None:
        token = self._session.access_token
        if not token:
            return None
        identity = self._store.get(token)
        if identity is None:
            # Stale cookie from a previous process
            self._session.clear()
        return identity

    async def create_anonymous_identity(self) -> Identity:
        token, identity = self._store.issue()
        self._session.set_token(token)
        logger.debug("Issued local anonymous identity %s", identity.id)
        return identity

    async def sign_out(self) -> None:
        token = self._session.access_token
        if token:
            self._store.revoke(token)
        self._session.clear()
