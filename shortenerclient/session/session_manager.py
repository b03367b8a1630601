"""Administrator session lifecycle

The session manager owns the admin bearer token and its expiry, persisted in
a key-value store so a session survives restarts until it expires.

State machine:

    LOADING ──initialize()──> UNAUTHENTICATED | AUTHENTICATED
    AUTHENTICATED ──logout() / expiry at startup / 401──> UNAUTHENTICATED
    any state ──login()──> AUTHENTICATED

There is no refresh: an expired token is discarded, never renewed.

Classes:
    SessionState:
        Enumeration of the manager's states.
    SessionManager:
        Session object handed by reference to whatever issues requests.

Example:
    >>> from shortenerclient.dao import KeyValueMemoryDAO
    >>> session = SessionManager(KeyValueMemoryDAO())
    >>> session.initialize()
    <SessionState.UNAUTHENTICATED: 'unauthenticated'>
    >>> session.login('abc', 4_102_444_800)
    >>> session.current_token()
    'abc'
    >>> session.logout()
    >>> session.current_token() is None
    True
"""

import logging
from enum import StrEnum

from shortenerclient.constants import StorageKey
from shortenerclient.dao.base import KeyValueBaseDAO
from shortenerclient.exceptions import SessionLoadingError
from shortenerclient.models import SessionModel, is_session_valid
from shortenerclient.utils.helpers import now_ms


logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    LOADING = 'loading'
    UNAUTHENTICATED = 'unauthenticated'
    AUTHENTICATED = 'authenticated'


class SessionManager:
    """Own the admin token, its expiry and the authenticated signal.

    Attributes:
        store (KeyValueBaseDAO):
            Persistent store holding `admin_token` and `token_expires_at`.
        state (SessionState):
            Current state. LOADING until initialize() completes.

    Methods:
        initialize() -> SessionState:
            Restore a persisted session if it is still valid, clear it otherwise.
        login(token: str, expires_at: int) -> None:
            Persist a new session, replacing any previous one.
        logout() -> None:
            Clear the session. Idempotent.
        current_token() -> str | None:
            Token while AUTHENTICATED, None otherwise. Never raises.
        require_ready() -> None:
            Raise SessionLoadingError while still LOADING.
    """

    def __init__(self, store: KeyValueBaseDAO):
        self.store = store
        self.state = SessionState.LOADING
        self._session: SessionModel | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    @property
    def is_loading(self) -> bool:
        return self.state is SessionState.LOADING

    @property
    def expires_at(self) -> int | None:
        return self._session.expires_at if self._session is not None else None

    def initialize(self) -> SessionState:
        """Restore the persisted session or fall back to UNAUTHENTICATED

        A missing token, a missing or non-numeric expiry, or an expiry that has
        passed (`now_ms >= expires_at * 1000`) all clear the persisted state.

        Returns:
            SessionState: the state reached (never LOADING).

        Raises:
            DataStoreError: if the store cannot be reached.
        """
        token = self.store.get(StorageKey.ADMIN_TOKEN)
        raw_expires_at = self.store.get(StorageKey.TOKEN_EXPIRES_AT)

        try:
            expires_at = int(raw_expires_at) if raw_expires_at is not None else None
        except ValueError:
            logger.debug('Persisted token expiry is not a number.', extra={'expiresAt': raw_expires_at})
            expires_at = None

        if is_session_valid(token, expires_at, now_ms()):
            self._session = SessionModel(token=token, expires_at=expires_at)
            self.state = SessionState.AUTHENTICATED
            logger.debug('Restored persisted session.', extra={'expiresAt': expires_at})
        else:
            if token is not None or raw_expires_at is not None:
                logger.info('Discarding expired or incomplete persisted session.', extra={'expiresAt': raw_expires_at})
            self._clear()

        return self.state

    def login(self, token: str, expires_at: int) -> None:
        """Persist (token, expires_at) and become AUTHENTICATED

        Args:
            token (str): bearer token issued by the backend.
            expires_at (int): unix seconds after which the token is rejected.

        Raises:
            DataStoreError: if the store cannot be reached.
        """
        expires_at = int(expires_at)
        self.store.set(StorageKey.ADMIN_TOKEN, token)
        self.store.set(StorageKey.TOKEN_EXPIRES_AT, str(expires_at))
        self._session = SessionModel(token=token, expires_at=expires_at)
        self.state = SessionState.AUTHENTICATED
        logger.info('Admin session started.', extra={'expiresAt': expires_at})

    def logout(self) -> None:
        was_authenticated = self.is_authenticated
        self._clear()
        if was_authenticated:
            logger.info('Admin session ended.')

    def current_token(self) -> str | None:
        if self.state is SessionState.AUTHENTICATED and self._session is not None:
            return self._session.token
        return None

    def require_ready(self) -> None:
        if self.state is SessionState.LOADING:
            raise SessionLoadingError('Session is still loading; call initialize() first.')

    def _clear(self) -> None:
        # In-memory state is dropped even when the store cannot be reached
        self._session = None
        self.state = SessionState.UNAUTHENTICATED
        try:
            self.store.delete(StorageKey.ADMIN_TOKEN)
        finally:
            self.store.delete(StorageKey.TOKEN_EXPIRES_AT)
