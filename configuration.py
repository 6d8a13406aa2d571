"""
Configuration constants for the bucket client.

This module contains all configuration parameters including:
- Cloud credentials and endpoints per storage type
- Bucket defaults (location, listing page size)
- Connection parameters (timeouts, retries, addressing)
"""

import os

# =============================================================================
# CLOUD STORAGE CONFIGURATION
# =============================================================================

# Generic S3-compatible endpoint (may be a custom domain bound to one bucket)
OSS_ENDPOINT: str = os.getenv("OSS_ENDPOINT", "")
OSS_ACCESS_KEY_ID: str = os.getenv("OSS_ACCESS_KEY_ID", "")
OSS_ACCESS_KEY_SECRET: str = os.getenv("OSS_ACCESS_KEY_SECRET", "")
OSS_CNAME: bool = os.getenv("OSS_CNAME", "false").lower() in ("1", "true", "yes")

# AWS S3 credentials and configuration
S3_ENDPOINT: str = os.getenv("S3_ENDPOINT", "s3.amazonaws.com")
AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
AWS_REGION: str = os.getenv("AWS_REGION", "eu-north-1")

# Cloudflare R2 credentials and configuration
R2_ENDPOINT: str = os.getenv("R2_ENDPOINT", "")
R2_ACCESS_KEY_ID: str = os.getenv("R2_ACCESS_KEY_ID", "")
R2_SECRET_ACCESS_KEY: str = os.getenv("R2_SECRET_ACCESS_KEY", "")

# =============================================================================
# BUCKET DEFAULTS
# =============================================================================

# Location used by create_bucket when the caller does not pass one
DEFAULT_LOCATION: str = os.getenv("DEFAULT_LOCATION", "")

# Buckets requested per ListBuckets page (service maximum is 10000)
LIST_PAGE_SIZE: int = int(os.getenv("LIST_PAGE_SIZE", "100"))

# Locations that must not be sent as a LocationConstraint
IMPLICIT_LOCATIONS = ("", "auto", "us-east-1")

# =============================================================================
# CONNECTION PARAMETERS
# =============================================================================

CONNECT_TIMEOUT_SECONDS: int = 5
READ_TIMEOUT_SECONDS: int = 60
MAX_RETRIES: int = 3  # Maximum number of retry attempts (botocore)
ADDRESSING_STYLE: str = os.getenv("ADDRESSING_STYLE", "virtual")  # or 'path' for R2

DEFAULT_SCHEME: str = "https"

# =============================================================================
# CLI DEFAULTS
# =============================================================================

DEFAULT_STORAGE_TYPE: str = "oss"
STORAGE_TYPES = ("oss", "r2", "s3")
