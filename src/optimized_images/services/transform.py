"""Transform service - resolves transform requests to URLs via the transform backend."""

import logging
from typing import Any

from ..clients.transform import TransformClient
from ..models.source import SourceImage
from ..models.transform import TransformRequest

logger = logging.getLogger(__name__)


class TransformInvoker:
    """Ask the transform backend for a primary URL and its WebP equivalent."""

    def __init__(self, client: TransformClient, params: dict[str, Any] | None = None):
        self.client = client
        self.params = params or {}

    def resolve(
        self, request: TransformRequest, source: SourceImage
    ) -> tuple[str | None, str | None]:
        """
        Resolve one transform request.

        Returns (url, webp_url), or (None, None) when the backend produces
        nothing for the request. A missing WebP conversion comes back as ""
        so both URL maps keep the same keys.
        """
        try:
            url = self.client.get_transform_url(source, request, self.params)
        except Exception as e:
            logger.warning(f"Failed to get transform URL for {request.target_width}x{request.target_height}: {e}")
            return None, None

        if not url:
            logger.debug(f"No transform URL for {request.target_width}x{request.target_height}, skipping")
            return None, None

        try:
            webp_url = self.client.get_webp_url(url) or ""
        except Exception as e:
            logger.warning(f"Failed to get WebP URL for {url}: {e}")
            webp_url = ""

        return url, webp_url
