"""Base class for transform backends."""

from abc import ABC, abstractmethod
from typing import Any

from ...models.config import Settings
from ...models.source import SourceImage
from ...models.transform import TransformRequest


class TransformClient(ABC):
    """Turns a transform request for a source image into a URL."""

    # Whether the backend can emit interlaced/progressive output
    supports_interlace: bool = False

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Settings) -> "TransformClient":
        """Create a client configured from settings."""
        pass

    @abstractmethod
    def get_transform_url(
        self,
        source: SourceImage,
        request: TransformRequest,
        params: dict[str, Any] | None = None,
    ) -> str:
        """Return the transform URL, or "" if the backend cannot produce one."""
        pass

    @abstractmethod
    def get_webp_url(self, url: str) -> str:
        """Return the WebP equivalent of a transform URL, or ""."""
        pass
