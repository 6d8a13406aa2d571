"""
Factory module for creating storage systems and clients.
"""

import logging

# Suppress boto3/botocore logging BEFORE importing any boto3-related modules
logging.getLogger('botocore').setLevel(logging.CRITICAL)
logging.getLogger('botocore.credentials').setLevel(logging.CRITICAL)
logging.getLogger('boto3').setLevel(logging.CRITICAL)
logging.getLogger('urllib3').setLevel(logging.CRITICAL)

from common.config_store import ConfigStore
from systems.base import ObjectStorageSystem
from systems.r2 import R2System
from systems.aws import AWSSystem
from systems.client import StorageClient
import configuration

logger = logging.getLogger(__name__)

SYSTEMS = {
    "oss": ObjectStorageSystem,
    "r2": R2System,
    "s3": AWSSystem,
}


def create_storage_system(storage_type: str, store: ConfigStore = None) -> ObjectStorageSystem:
    """Create and return the appropriate storage system based on type.

    Args:
        storage_type: Storage type ('oss', 'r2' or 's3')
        store: Config store the system reads connection details from

    Returns:
        Storage system instance (ObjectStorageSystem, R2System or AWSSystem)

    Raises:
        ValueError: If storage_type is not supported
    """
    storage_type = storage_type.lower()
    system_class = SYSTEMS.get(storage_type)
    if system_class is None:
        raise ValueError(
            f"Unsupported storage type: {storage_type}. Must be one of {', '.join(SYSTEMS)}."
        )
    return system_class(store=store)


def connection_options(storage_type: str) -> dict:
    """Return client options for ``storage_type`` from the environment."""
    storage_type = storage_type.lower()

    if storage_type == "oss":
        return {
            "endpoint": configuration.OSS_ENDPOINT,
            "access_key_id": configuration.OSS_ACCESS_KEY_ID,
            "access_key_secret": configuration.OSS_ACCESS_KEY_SECRET,
            "cname": configuration.OSS_CNAME,
        }
    elif storage_type == "r2":
        return {
            "endpoint": configuration.R2_ENDPOINT,
            "access_key_id": configuration.R2_ACCESS_KEY_ID,
            "access_key_secret": configuration.R2_SECRET_ACCESS_KEY,
        }
    elif storage_type == "s3":
        return {
            "endpoint": configuration.S3_ENDPOINT,
            "access_key_id": configuration.AWS_ACCESS_KEY_ID,
            "access_key_secret": configuration.AWS_SECRET_ACCESS_KEY,
        }
    else:
        raise ValueError(
            f"Unsupported storage type: {storage_type}. Must be one of {', '.join(SYSTEMS)}."
        )


def create_client(storage_type: str, store: ConfigStore = None) -> StorageClient:
    """Create a StorageClient for ``storage_type`` configured from the environment."""
    options = connection_options(storage_type)
    system = create_storage_system(storage_type, store=store)
    client = StorageClient(store=system.store, storage_system=system, **options)
    logger.info(f"Created {storage_type.upper()} client for {options['endpoint']}")
    return client
