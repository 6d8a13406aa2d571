"""
Base class for S3-compatible object storage systems.

The storage system is the only component that talks to the network: it turns
bucket operations into signed S3 requests through boto3 and hands the parsed
responses back. Connection details are read from a ConfigStore on every call.
"""

import boto3
import botocore
import botocore.session
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
import logging
import threading
from typing import Optional

from common.config_store import ConfigState, ConfigStore, config_store
from configuration import (
    ADDRESSING_STYLE,
    CONNECT_TIMEOUT_SECONDS,
    DEFAULT_LOCATION,
    DEFAULT_SCHEME,
    IMPLICIT_LOCATIONS,
    LIST_PAGE_SIZE,
    MAX_RETRIES,
    READ_TIMEOUT_SECONDS,
)
from systems.records import BucketPage, BucketRecord

logger = logging.getLogger(__name__)

# ListBuckets parameters required for filtered pagination (botocore >= 1.35.44)
LIST_BUCKETS_PARAMS = ("Prefix", "ContinuationToken")


class ObjectStorageSystem:
    """Synchronous S3 bucket operations backed by a boto3 client."""

    default_location: str = DEFAULT_LOCATION
    addressing_style: str = ADDRESSING_STYLE
    region_name: Optional[str] = None

    def __init__(self, store: ConfigStore = None, page_size: int = LIST_PAGE_SIZE):
        self.store = store if store is not None else config_store
        self.page_size = page_size

        # boto3 client for the most recent configuration snapshot only
        self._state: Optional[ConfigState] = None
        self._client = None
        self._client_lock = threading.Lock()

    def _create_config(self, state: ConfigState) -> Config:
        """Create the botocore config for ``state``."""
        # A custom domain addresses the bucket through its host name
        addressing_style = "virtual" if state.cname else self.addressing_style
        return Config(
            connect_timeout=CONNECT_TIMEOUT_SECONDS,
            read_timeout=READ_TIMEOUT_SECONDS,
            retries={
                'max_attempts': MAX_RETRIES,
                'mode': 'standard',
            },
            s3={
                'addressing_style': addressing_style,
            },
        )

    @staticmethod
    def endpoint_url(endpoint: str) -> str:
        """Return ``endpoint`` with a scheme, defaulting to https."""
        if "://" in endpoint:
            return endpoint
        return f"{DEFAULT_SCHEME}://{endpoint}"

    @property
    def client(self):
        """boto3 S3 client for the store's current configuration."""
        state = self.store.snapshot()
        with self._client_lock:
            if self._client is None or state != self._state:
                self._client = boto3.client(
                    "s3",
                    endpoint_url=self.endpoint_url(state.endpoint),
                    aws_access_key_id=state.access_key_id,
                    aws_secret_access_key=state.access_key_secret,
                    region_name=self.region_name,
                    config=self._create_config(state),
                )
                self._state = state
                logger.info(f"Initialized storage client for {state.endpoint}")
            return self._client

    def list_buckets_page(self, prefix: Optional[str] = None,
                          marker: Optional[str] = None) -> BucketPage:
        """Fetch one page of buckets.

        Args:
            prefix: Only return buckets whose name starts with this value
            marker: Continuation token returned by the previous page

        Returns:
            BucketPage with the page's buckets, the next marker and whether
            more pages remain
        """
        params = {'MaxBuckets': self.page_size}
        if prefix:
            params['Prefix'] = prefix
        if marker:
            params['ContinuationToken'] = marker

        try:
            response = self.client.list_buckets(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to list buckets (prefix={prefix!r}): {e}")
            raise

        buckets = [
            BucketRecord(
                name=item["Name"],
                creation_date=item.get("CreationDate"),
                region=item.get("BucketRegion"),
            )
            for item in response.get("Buckets", [])
        ]
        next_marker = response.get("ContinuationToken")
        return BucketPage(buckets, next_marker=next_marker, truncated=bool(next_marker))

    def create_bucket(self, name: str, location: Optional[str] = None) -> None:
        """Create bucket ``name`` in ``location`` (default_location if None)."""
        if location is None:
            location = self.default_location

        params = {'Bucket': name}
        if location not in IMPLICIT_LOCATIONS:
            params['CreateBucketConfiguration'] = {'LocationConstraint': location}

        try:
            self.client.create_bucket(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to create bucket {name}: {e}")
            raise

        logger.info(f"Created bucket {name} (location={location or 'default'})")

    def delete_bucket(self, name: str) -> None:
        """Delete bucket ``name``. The service refuses non-empty buckets."""
        try:
            self.client.delete_bucket(Bucket=name)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            status_code = e.response.get('ResponseMetadata', {}).get('HTTPStatusCode', 0)
            logger.error(
                f"S3 error {error_code} (HTTP {status_code}) deleting bucket {name}"
            )
            raise
        except BotoCoreError as e:
            logger.error(f"Failed to delete bucket {name}: {e}")
            raise

        logger.info(f"Deleted bucket {name}")

    def verify_connection(self) -> bool:
        """Verify the endpoint and credentials by listing a single bucket.

        Custom domains cannot list buckets, so only the client setup is checked.
        """
        try:
            logger.info("Verifying storage connection...")
            if self.store.get("cname"):
                self.client
                logger.info("✓ CNAME endpoint: bucket listing check skipped")
            else:
                self.client.list_buckets(MaxBuckets=1)
            logger.info(f"✓ Endpoint: {self.store.get('endpoint')}")
            return True
        except Exception as e:
            logger.error(f"✗ Connection verification failed: {e}")
            return False


def verify_setup() -> bool:
    """Verify dependencies and configuration before talking to the service.

    Returns:
        True if setup is correct, False otherwise
    """
    print("=" * 60)
    print("SETUP VERIFICATION")
    print("=" * 60)

    all_ok = True

    # 1. Check boto3
    print(f"✓ boto3 version: {boto3.__version__}")

    # 2. Check botocore supports paginated, prefix-filtered ListBuckets
    print(f"✓ botocore version: {botocore.__version__}")
    model = botocore.session.get_session().get_service_model("s3")
    list_input = model.operation_model("ListBuckets").input_shape
    members = list_input.members if list_input is not None else {}
    missing = [name for name in LIST_BUCKETS_PARAMS if name not in members]
    if missing:
        print(f"✗ botocore too old - ListBuckets lacks {', '.join(missing)}")
        print("  Install with: pip install -U boto3 botocore")
        all_ok = False
    else:
        print("✓ ListBuckets pagination and prefix filter supported")

    # 3. Configuration check
    print(f"✓ LIST_PAGE_SIZE: {LIST_PAGE_SIZE}")
    print(f"✓ Addressing style: {ADDRESSING_STYLE}")

    print("=" * 60)

    if not all_ok:
        print("\n⚠️ Setup verification failed. Fix issues before running.")
    else:
        print("\n✓ Setup verification passed.")

    return all_ok
