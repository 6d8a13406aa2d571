"""
Common utilities for the bucket client.
"""

from .bucket_iterator import BucketIterator
from .config_store import ConfigState, ConfigStore, config_store
from .errors import (
    MissingArgumentsError,
    OperationNotSupportedError,
    StorageClientError,
    UninitializedConfigError,
)

__all__ = [
    'BucketIterator',
    'ConfigState',
    'ConfigStore',
    'config_store',
    'MissingArgumentsError',
    'OperationNotSupportedError',
    'StorageClientError',
    'UninitializedConfigError',
]
