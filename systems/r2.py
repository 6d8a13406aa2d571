"""
Cloudflare R2 object storage system implementation.
"""

from systems.base import ObjectStorageSystem
import logging

logger = logging.getLogger(__name__)


class R2System(ObjectStorageSystem):
    """Cloudflare R2 object storage system."""

    # R2 has a single jurisdiction-wide location and wants path-style URLs
    region_name = "auto"
    default_location = "auto"
    addressing_style = "path"

    def __init__(self, store=None, **kwargs):
        super().__init__(store=store, **kwargs)
        logger.info("Initialized R2 system")
