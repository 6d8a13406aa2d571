"""
Lazy iteration over paginated bucket listings.
"""

import logging
from collections import deque
from typing import Optional

logger = logging.getLogger(__name__)


class BucketIterator:
    """Yields BucketRecords one at a time, fetching pages on demand.

    Nothing is requested from the storage system until the first ``next()``.
    A page is fetched only when the buffer is empty and the previous page was
    truncated. Errors raised by the storage system surface from the ``next()``
    that triggered the fetch and end the iteration.

    A single iterator is consumed once and is not safe to advance from
    several threads at the same time.
    """

    def __init__(self, storage_system, prefix: Optional[str] = None):
        self.storage_system = storage_system
        self.prefix = prefix

        self._buffer = deque()
        self._marker = None
        self._truncated = True
        self._finished = False
        self.pages_fetched = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self._finished:
            raise StopIteration

        while not self._buffer:
            if not self._truncated:
                self._finished = True
                raise StopIteration
            self._fetch_page()

        return self._buffer.popleft()

    def _fetch_page(self) -> None:
        """Request the next page and append its buckets to the buffer."""
        try:
            page = self.storage_system.list_buckets_page(self.prefix, self._marker)
        except Exception:
            self._finished = True
            self._buffer.clear()
            raise

        self.pages_fetched += 1
        self._buffer.extend(page.buckets)
        self._marker = page.next_marker
        # A truncated page without a marker cannot be resumed
        self._truncated = bool(page.truncated and page.next_marker)

        logger.debug(
            f"Fetched bucket page {self.pages_fetched}: {len(page.buckets)} buckets "
            f"(prefix={self.prefix!r}, truncated={page.truncated})"
        )
