"""
Tests for the StorageClient facade.
"""

import unittest
import sys
import os
from unittest.mock import Mock, patch

# Add the parent directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from botocore.exceptions import ClientError

from common.bucket_iterator import BucketIterator
from common.config_store import ConfigStore, config_store
from common.errors import MissingArgumentsError, OperationNotSupportedError
from systems.base import ObjectStorageSystem
from systems.bucket import Bucket
from systems.client import StorageClient
from systems.records import BucketPage, BucketRecord

OPTIONS = {
    "endpoint": "oss-cn-hangzhou.aliyuncs.com",
    "access_key_id": "id",
    "access_key_secret": "secret",
}


class TestClientConstruction(unittest.TestCase):
    """Test cases for constructing a StorageClient."""

    def setUp(self):
        self.store = ConfigStore()

    def test_missing_single_argument(self):
        """The message names exactly the missing key."""
        options = dict(OPTIONS)
        del options["access_key_secret"]

        with self.assertRaises(MissingArgumentsError) as ctx:
            StorageClient(store=self.store, **options)

        self.assertEqual(str(ctx.exception), "Missing arguments: access_key_secret")
        self.assertEqual(ctx.exception.missing, ["access_key_secret"])

    def test_missing_arguments_listed_in_declaration_order(self):
        """All missing keys are listed, comma-joined, in declaration order."""
        with self.assertRaises(MissingArgumentsError) as ctx:
            StorageClient(store=self.store, access_key_id="id")
        self.assertEqual(
            str(ctx.exception), "Missing arguments: endpoint, access_key_secret"
        )

        with self.assertRaises(MissingArgumentsError) as ctx:
            StorageClient(store=self.store)
        self.assertEqual(
            str(ctx.exception),
            "Missing arguments: endpoint, access_key_id, access_key_secret",
        )

    def test_empty_values_count_as_missing(self):
        """None and empty strings do not satisfy a required key."""
        with self.assertRaises(MissingArgumentsError) as ctx:
            StorageClient(store=self.store, endpoint="", access_key_id=None,
                          access_key_secret="secret")
        self.assertEqual(ctx.exception.missing, ["endpoint", "access_key_id"])

    def test_failed_construction_leaves_store_untouched(self):
        """A construction error writes nothing to the store."""
        with self.assertRaises(MissingArgumentsError):
            StorageClient(store=self.store, endpoint="x")
        self.assertFalse(self.store.is_configured())

    def test_construction_sets_store_once(self):
        """Endpoint and credentials are each set exactly once."""
        store = Mock(spec=ConfigStore)
        StorageClient(store=store, storage_system=Mock(), cname=True, **OPTIONS)

        store.set_endpoint.assert_called_once_with("oss-cn-hangzhou.aliyuncs.com", True)
        store.set_credentials.assert_called_once_with("id", "secret")

    def test_cname_defaults_to_false(self):
        """cname is False unless explicitly True."""
        StorageClient(store=self.store, **OPTIONS)
        self.assertFalse(self.store.get("cname"))

        StorageClient(store=self.store, cname="yes", **OPTIONS)
        self.assertFalse(self.store.get("cname"))

    def test_default_storage_system_reads_same_store(self):
        """Without a storage system, one bound to the client's store is created."""
        client = StorageClient(store=self.store, **OPTIONS)
        self.assertIsInstance(client.storage_system, ObjectStorageSystem)
        self.assertIs(client.storage_system.store, self.store)

    def test_default_store_is_process_wide(self):
        """Clients without an explicit store share config_store."""
        try:
            client = StorageClient(**OPTIONS)
            self.assertIs(client.store, config_store)
            self.assertEqual(config_store.get("endpoint"), OPTIONS["endpoint"])
        finally:
            config_store.reset()


class TestClientOperations(unittest.TestCase):
    """Test cases for StorageClient operations."""

    def setUp(self):
        self.store = ConfigStore()
        self.system = Mock()
        self.client = StorageClient(store=self.store, storage_system=self.system, **OPTIONS)

    def test_list_buckets_is_lazy(self):
        """No page is requested until the first bucket is consumed."""
        self.system.list_buckets_page.return_value = BucketPage(
            [BucketRecord("a")], truncated=False
        )

        buckets = self.client.list_buckets(prefix="a")
        self.assertIsInstance(buckets, BucketIterator)
        self.system.list_buckets_page.assert_not_called()

        self.assertEqual([b.name for b in buckets], ["a"])
        self.system.list_buckets_page.assert_called_once_with("a", None)

    def test_list_buckets_follows_pages(self):
        """Pages are concatenated until one is not truncated."""
        self.system.list_buckets_page.side_effect = [
            BucketPage([BucketRecord("a"), BucketRecord("b")], next_marker="M1", truncated=True),
            BucketPage([BucketRecord("c")], truncated=False),
        ]

        names = [b.name for b in self.client.list_buckets()]

        self.assertEqual(names, ["a", "b", "c"])
        self.assertEqual(self.system.list_buckets_page.call_count, 2)

    def test_list_buckets_fresh_each_call(self):
        """Each call starts an independent listing from the first page."""
        self.system.list_buckets_page.return_value = BucketPage(
            [BucketRecord("a")], truncated=False
        )

        first = self.client.list_buckets()
        second = self.client.list_buckets()
        self.assertIsNot(first, second)
        self.assertEqual(len(list(first)), 1)
        self.assertEqual(len(list(second)), 1)
        self.assertEqual(self.system.list_buckets_page.call_count, 2)

    def test_list_buckets_rejected_for_cname(self):
        """Listing under a custom domain fails before any request."""
        client = StorageClient(store=self.store, storage_system=self.system,
                               cname=True, **OPTIONS)

        for prefix in (None, "", "logs-"):
            with self.assertRaises(OperationNotSupportedError):
                client.list_buckets(prefix=prefix)
        self.system.list_buckets_page.assert_not_called()

    def test_create_bucket_forwards_arguments(self):
        """create_bucket passes name and location through unchanged."""
        self.client.create_bucket("my-bucket", location="oss-cn-beijing")
        self.system.create_bucket.assert_called_once_with("my-bucket", "oss-cn-beijing")

        self.system.reset_mock()
        self.client.create_bucket("other")
        self.system.create_bucket.assert_called_once_with("other", None)

    def test_create_bucket_error_propagates(self):
        """Errors from the storage system reach the caller untouched."""
        error = ClientError(
            {'Error': {'Code': 'BucketAlreadyExists', 'Message': 'taken'}}, 'CreateBucket'
        )
        self.system.create_bucket.side_effect = error

        with self.assertRaises(ClientError) as ctx:
            self.client.create_bucket("taken")
        self.assertIs(ctx.exception, error)

    def test_delete_bucket_not_empty_surfaces_verbatim(self):
        """A 'bucket not empty' refusal is the storage system's own error."""
        error = ClientError(
            {'Error': {'Code': 'BucketNotEmpty', 'Message': 'The bucket is not empty'}},
            'DeleteBucket',
        )
        self.system.delete_bucket.side_effect = error

        with self.assertRaises(ClientError) as ctx:
            self.client.delete_bucket("full")

        self.assertIs(ctx.exception, error)
        self.assertEqual(ctx.exception.response['Error']['Code'], 'BucketNotEmpty')
        self.system.delete_bucket.assert_called_once_with("full")

    def test_get_bucket_is_local(self):
        """get_bucket returns a handle without touching the storage system."""
        bucket = self.client.get_bucket("does-not-exist")

        self.assertEqual(bucket, Bucket("does-not-exist"))
        self.assertEqual(bucket.name, "does-not-exist")
        self.assertEqual(self.system.mock_calls, [])

    def test_connect_to_bucket(self):
        """connect_to_bucket configures the store and returns the handle."""
        bucket = StorageClient.connect_to_bucket(
            "my-bucket", store=self.store, storage_system=self.system, **OPTIONS
        )
        self.assertEqual(bucket.name, "my-bucket")
        self.assertEqual(self.store.get("endpoint"), OPTIONS["endpoint"])


class TestSharedConfiguration(unittest.TestCase):
    """Clients sharing a store see the most recent construction."""

    def setUp(self):
        self.store = ConfigStore()

    def test_reconstruction_changes_earlier_client(self):
        """A later construction with cname=True disables listing on an earlier client."""
        system = Mock()
        system.list_buckets_page.return_value = BucketPage([], truncated=False)
        earlier = StorageClient(store=self.store, storage_system=system, **OPTIONS)
        self.assertEqual(list(earlier.list_buckets()), [])

        StorageClient(store=self.store, storage_system=Mock(), cname=True,
                      endpoint="files.example.com", access_key_id="other",
                      access_key_secret="other-secret")

        with self.assertRaises(OperationNotSupportedError):
            earlier.list_buckets()

    @patch('systems.base.boto3')
    def test_reconstruction_changes_credentials_of_earlier_client(self, mock_boto3):
        """The earlier client's requests use the latest credentials."""
        earlier = StorageClient(store=self.store, **OPTIONS)
        StorageClient(store=self.store, endpoint="oss-cn-beijing.aliyuncs.com",
                      access_key_id="new-id", access_key_secret="new-secret")

        earlier.delete_bucket("b")

        kwargs = mock_boto3.client.call_args.kwargs
        self.assertEqual(kwargs["aws_access_key_id"], "new-id")
        self.assertEqual(kwargs["aws_secret_access_key"], "new-secret")
        self.assertEqual(kwargs["endpoint_url"], "https://oss-cn-beijing.aliyuncs.com")

    def test_separate_stores_are_isolated(self):
        """Clients given their own stores do not affect each other."""
        first = StorageClient(store=ConfigStore(), storage_system=Mock(), **OPTIONS)
        StorageClient(store=ConfigStore(), storage_system=Mock(), cname=True, **OPTIONS)

        self.assertIsInstance(first.list_buckets(), BucketIterator)


if __name__ == '__main__':
    unittest.main()
