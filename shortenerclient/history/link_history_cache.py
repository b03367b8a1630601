"""Local history of links created by an anonymous visitor

The history is a JSON array persisted under a single key, most recent first,
capped at `History.CAPACITY` entries. It is independent of any admin session.

Responsibilities:
    - Prepend newly created links and truncate to capacity (save);
    - Hide links whose expiry has passed whenever the history is read (list);
    - Drop a single link by id (remove);
    - Treat unreadable persisted data as an empty history.

Expired links are filtered at read time, never purged on a timer. Writes are
built from the filtered view, so the next save() or remove() also drops them
from the backing store.

NOTE: every write is a read-modify-write of the whole list without locking.
      Two writers sharing a store (e.g. two processes on one profile) race and
      the last writer wins; callers serialize their own writes.

Example:
    >>> from shortenerclient.dao import KeyValueMemoryDAO
    >>> from shortenerclient.models import LinkRecordModel
    >>> cache = LinkHistoryCache(KeyValueMemoryDAO())
    >>> cache.save(LinkRecordModel(id=1, slug='abc123'))
    LinkRecordModel(id=1, slug='abc123', ...)
    >>> [link.slug for link in cache.list()]
    ['abc123']
    >>> cache.remove(1)
    >>> cache.list()
    []
"""

import json
import logging
from datetime import datetime, UTC

from beartype import beartype

from shortenerclient.constants import History, StorageKey
from shortenerclient.dao.base import KeyValueBaseDAO
from shortenerclient.models import LinkRecordModel


logger = logging.getLogger(__name__)

# Most recent first, at most `capacity` records
LinkHistory = list[LinkRecordModel]


class LinkHistoryCache:
    """Bounded, lazily expiring list of visitor-created links.

    Attributes:
        store (KeyValueBaseDAO):
            Persistent store holding the `user_links` JSON array.
        capacity (int):
            Maximum number of records kept. Defaults to 50.

    Methods:
        save(link: LinkRecordModel) -> LinkRecordModel:
            Stamp, prepend, truncate and persist. Returns the stamped record.
        list() -> LinkHistory:
            Unexpired records, most recent first.
        remove(link_id: int | str) -> None:
            Drop the record with that id (no-op if absent).
    """

    def __init__(self, store: KeyValueBaseDAO, capacity: int = History.CAPACITY):
        if capacity < 1:
            raise ValueError(f'History capacity must be a positive integer (given value: {capacity}).')
        self.store = store
        self.capacity = capacity

    @beartype
    def save(self, link: LinkRecordModel) -> LinkRecordModel:
        """Prepend link (stamped with the current time) and keep the first `capacity` records

        Raises:
            DataStoreError: if the store cannot be reached.
        """
        stamped = link.stamped(datetime.now(UTC))
        links = [stamped, *self.list()][: self.capacity]
        self._write(links)
        logger.debug('Saved link to history.', extra={'linkId': stamped.id, 'historySize': len(links)})
        return stamped

    def list(self) -> LinkHistory:
        """Return unexpired records in stored order (most recent first)

        Absent or unparseable data yields an empty list, never an error.
        """
        now = datetime.now(UTC)
        return [link for link in self._read() if not link.is_expired(now)]

    @beartype
    def remove(self, link_id: int | str) -> None:
        links = self.list()
        remaining = [link for link in links if str(link.id) != str(link_id)]
        if len(remaining) != len(links):
            logger.debug('Removed link from history.', extra={'linkId': link_id})
        self._write(remaining)

    def clear(self) -> None:
        self.store.delete(StorageKey.USER_LINKS)

    def _read(self) -> LinkHistory:
        raw = self.store.get(StorageKey.USER_LINKS)
        if not raw:
            return []

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug('Persisted link history is not valid JSON, treating as empty.')
            return []
        if not isinstance(entries, list):
            logger.debug('Persisted link history is not a list, treating as empty.')
            return []

        links = []
        for entry in entries:
            try:
                links.append(LinkRecordModel.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.debug('Skipping malformed link history entry.', extra={'entry': entry})
        return links[: self.capacity]

    def _write(self, links: LinkHistory) -> None:
        self.store.set(StorageKey.USER_LINKS, json.dumps([link.to_dict() for link in links]))
