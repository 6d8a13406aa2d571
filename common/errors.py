"""
Errors raised by the bucket client itself.

Errors coming from the storage service (botocore ClientError, transport
failures) are never wrapped; they reach the caller as raised by boto3.
"""


class StorageClientError(Exception):
    """Base class for errors detected locally by the client."""


class MissingArgumentsError(StorageClientError):
    """Raised when required construction options are absent."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing arguments: {', '.join(self.missing)}")


class OperationNotSupportedError(StorageClientError):
    """Raised when an operation cannot run under the current configuration."""


class UninitializedConfigError(StorageClientError):
    """Raised when a configuration field is read before it was set."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Configuration field '{field}' has not been set")
