from dataclasses import dataclass


def is_session_valid(token: str | None, expires_at: int | None, now_ms: float) -> bool:
    """Decide session validity from its parts and the current time

    Expiry is kept in unix seconds (as issued by the backend) and compared
    against a millisecond clock.

    Example:
        >>> is_session_valid('abc', 1_700_000_000, 1_699_999_999_000)
        True
        >>> is_session_valid('abc', 1_700_000_000, 1_700_000_000_000)
        False
        >>> is_session_valid(None, 1_700_000_000, 0)
        False
    """
    if not token or expires_at is None:
        return False
    return now_ms < expires_at * 1000


@dataclass(frozen=True)
class SessionModel:
    """Represent the administrator's authenticated session.

    Attributes:
        token (str):
            Opaque bearer credential attached to authenticated requests.
        expires_at (int):
            Unix timestamp (seconds) after which the token is rejected.
    """

    token: str
    expires_at: int

    def is_valid(self, now_ms: float) -> bool:
        return is_session_valid(self.token, self.expires_at, now_ms)
