"""
Entry point for bucket operations.

Example:
    client = StorageClient(
        endpoint="oss-cn-hangzhou.aliyuncs.com",
        access_key_id="access_key_id",
        access_key_secret="access_key_secret",
    )
    for bucket in client.list_buckets(prefix="logs-"):
        print(bucket.name)
    bucket = client.get_bucket("my-bucket")
"""

import logging
from typing import Optional

from common.bucket_iterator import BucketIterator
from common.config_store import ConfigStore, config_store
from common.errors import MissingArgumentsError, OperationNotSupportedError
from systems.base import ObjectStorageSystem
from systems.bucket import Bucket

logger = logging.getLogger(__name__)

REQUIRED_ARGS = ("endpoint", "access_key_id", "access_key_secret")


class StorageClient:
    """Lists, creates and deletes buckets and hands out bucket handles.

    Construction writes the endpoint and credentials into ``store``, the
    process-wide ``config_store`` unless another store is passed. Every client
    sharing a store sees the configuration of the most recent construction.

    Options:
        endpoint: Service endpoint, either the provider's standard domain
            (oss-cn-hangzhou.aliyuncs.com) or a custom domain (my-domain.com)
        access_key_id: Access key id
        access_key_secret: Access key secret
        cname: True if ``endpoint`` is a custom domain bound to a bucket
    """

    def __init__(self, store: ConfigStore = None,
                 storage_system: ObjectStorageSystem = None, **opts):
        missing = [arg for arg in REQUIRED_ARGS if opts.get(arg) in (None, "")]
        if missing:
            raise MissingArgumentsError(missing)

        self.store = store if store is not None else config_store
        self.store.set_endpoint(opts["endpoint"], opts.get("cname") is True)
        self.store.set_credentials(opts["access_key_id"], opts["access_key_secret"])

        if storage_system is None:
            storage_system = ObjectStorageSystem(store=self.store)
        self.storage_system = storage_system

    @classmethod
    def connect_to_bucket(cls, name: str, **opts) -> Bucket:
        """Construct a client from ``opts`` and return the handle for ``name``."""
        return cls(**opts).get_bucket(name)

    def list_buckets(self, prefix: Optional[str] = None) -> BucketIterator:
        """List all buckets, optionally only those whose name starts with ``prefix``.

        The returned iterator fetches pages lazily; no request is made until
        it is advanced.

        Raises:
            OperationNotSupportedError: If the endpoint is a custom domain
        """
        if self.store.get("cname"):
            raise OperationNotSupportedError("Cannot list buckets for a CNAME endpoint")
        return BucketIterator(self.storage_system, prefix=prefix)

    def create_bucket(self, name: str, location: Optional[str] = None) -> None:
        """Create a bucket.

        Args:
            name: Bucket name
            location: Region for the bucket; the storage system's default
                location applies when omitted
        """
        self.storage_system.create_bucket(name, location)

    def delete_bucket(self, name: str) -> None:
        """Delete a bucket. Fails on the service side if the bucket is not empty."""
        self.storage_system.delete_bucket(name)

    def get_bucket(self, name: str) -> Bucket:
        """Return a handle for ``name`` without contacting the service."""
        return Bucket(name)
