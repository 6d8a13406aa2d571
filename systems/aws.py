"""
AWS S3 object storage system implementation.
"""

from systems.base import ObjectStorageSystem
from configuration import AWS_REGION
import logging

logger = logging.getLogger(__name__)


class AWSSystem(ObjectStorageSystem):
    """AWS S3 object storage system."""

    region_name = AWS_REGION
    default_location = AWS_REGION

    def __init__(self, store=None, **kwargs):
        super().__init__(store=store, **kwargs)
        logger.info(f"Initialized AWS S3 system (region={self.region_name})")
