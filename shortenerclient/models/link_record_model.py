from dataclasses import dataclass, field, replace
from datetime import datetime, UTC
from typing import Any

from shortenerclient.types import LinkID, JSONPayload
from shortenerclient.utils.helpers import parse_timestamp, format_timestamp


@dataclass(frozen=True)
class LinkRecordModel:
    """Represent a visitor-created short link kept in the local history.

    Attributes:
        id (int | str):
            Backend identifier of the link.
        slug (str):
            Short identifier appended to the service origin.
        short_url (str):
            Full shortened URL as returned by the backend.
        original_url (str):
            Long URL the short link redirects to.
        expires_at (Optional[datetime]):
            Moment the backend stops serving the link. None for permanent links.
        permanent (bool):
            True if the backend marked the link as never expiring.
        saved_at (Optional[datetime]):
            Moment the record was inserted into the local history.

    Example:
        >>> record = LinkRecordModel.from_dict({
        ...     'id': 1,
        ...     'slug': 'abc123',
        ...     'short_url': 'https://sho.rt/abc123',
        ...     'original_url': 'https://example.com',
        ...     'expires_at': '2025-11-01T00:00:00Z',
        ... })
        >>> record.is_expired(datetime(2025, 12, 1, tzinfo=UTC))
        True
    """

    id: LinkID
    slug: str
    short_url: str = ''
    original_url: str = ''
    expires_at: datetime | None = None
    permanent: bool = False
    saved_at: datetime | None = field(default=None, compare=False)

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or datetime.now(UTC))

    def stamped(self, saved_at: datetime) -> 'LinkRecordModel':
        return replace(self, saved_at=saved_at)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LinkRecordModel':
        """Build a record from a backend payload or a persisted entry

        Raises:
            KeyError: if 'id' or 'slug' is missing.
            ValueError: if a timestamp is malformed.
        """
        return cls(
            id=data['id'],
            slug=data['slug'],
            short_url=data.get('short_url') or '',
            original_url=data.get('original_url') or '',
            expires_at=parse_timestamp(data.get('expires_at')),
            permanent=bool(data.get('permanent', False)),
            saved_at=parse_timestamp(data.get('savedAt')),
        )

    def to_dict(self) -> JSONPayload:
        return {
            'id': self.id,
            'slug': self.slug,
            'short_url': self.short_url,
            'original_url': self.original_url,
            'expires_at': format_timestamp(self.expires_at),
            'permanent': self.permanent,
            'savedAt': format_timestamp(self.saved_at),
        }
