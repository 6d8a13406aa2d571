"""
Process-wide connection configuration for the bucket client.
"""

import threading
import logging
from typing import Any, Dict, NamedTuple

from common.errors import UninitializedConfigError

logger = logging.getLogger(__name__)


class ConfigState(NamedTuple):
    """Immutable snapshot of a fully populated store."""

    endpoint: str
    cname: bool
    access_key_id: str
    access_key_secret: str


class ConfigStore:
    """Holds endpoint and credentials shared by every client using the store.

    Values are stored as given; the endpoint format is left for the storage
    system to interpret. The last writer wins for all readers.
    """

    FIELDS = ConfigState._fields

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def set_endpoint(self, endpoint: str, cname: bool = False) -> None:
        """Store the service endpoint and whether it is a custom domain."""
        with self._lock:
            self._values["endpoint"] = endpoint
            self._values["cname"] = cname
        logger.debug(f"Endpoint set to {endpoint} (cname={cname})")

    def set_credentials(self, access_key_id: str, access_key_secret: str) -> None:
        """Store the access key pair."""
        with self._lock:
            self._values["access_key_id"] = access_key_id
            self._values["access_key_secret"] = access_key_secret
        logger.debug(f"Credentials set for access key {access_key_id}")

    def get(self, field: str) -> Any:
        """Return the current value of ``field``.

        Raises:
            ValueError: If ``field`` is not a known configuration field
            UninitializedConfigError: If the field's setter has not run yet
        """
        if field not in self.FIELDS:
            raise ValueError(
                f"Unknown configuration field: {field}. Must be one of {', '.join(self.FIELDS)}."
            )
        with self._lock:
            if field not in self._values:
                raise UninitializedConfigError(field)
            return self._values[field]

    def snapshot(self) -> ConfigState:
        """Return all fields at once, read under a single lock."""
        with self._lock:
            for field in self.FIELDS:
                if field not in self._values:
                    raise UninitializedConfigError(field)
            return ConfigState(**{field: self._values[field] for field in self.FIELDS})

    def is_configured(self) -> bool:
        with self._lock:
            return all(field in self._values for field in self.FIELDS)

    def reset(self) -> None:
        """Forget every stored value."""
        with self._lock:
            self._values.clear()


# Shared by every StorageClient constructed without an explicit store
config_store = ConfigStore()
