"""
Basic data structures returned by bucket listing.
"""

from datetime import datetime
from typing import List, Optional


class BucketRecord:
    """Data structure describing one bucket as reported by the service."""

    def __init__(self, name: str, creation_date: Optional[datetime] = None,
                 region: Optional[str] = None):
        self.name = name
        self.creation_date = creation_date
        self.region = region

    def __eq__(self, other):
        if not isinstance(other, BucketRecord):
            return NotImplemented
        return (self.name, self.creation_date, self.region) == (
            other.name, other.creation_date, other.region
        )

    def __hash__(self):
        return hash((self.name, self.creation_date, self.region))

    def __repr__(self):
        return f"BucketRecord(name={self.name!r}, region={self.region!r})"


class BucketPage:
    """One page of a ListBuckets response."""

    def __init__(self, buckets: List[BucketRecord], next_marker: Optional[str] = None,
                 truncated: bool = False):
        self.buckets = buckets
        self.next_marker = next_marker
        self.truncated = truncated
