"""Imgix transform client - query-parameter URLs on an imgix source domain."""

from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from . import register
from .base import TransformClient
from ...models.config import Settings
from ...models.source import SourceImage
from ...models.transform import TransformRequest

_PROGRESSIVE_FORMATS = ("jpg", "jpeg")


@register("imgix")
class ImgixTransformClient(TransformClient):
    """Builds imgix rendering API URLs."""

    supports_interlace = True

    def __init__(self, domain: str | None, secure: bool = True):
        self.domain = (domain or "").strip().strip("/")
        self.scheme = "https" if secure else "http"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImgixTransformClient":
        return cls(settings.imgix_domain)

    def get_transform_url(
        self,
        source: SourceImage,
        request: TransformRequest,
        params: dict[str, Any] | None = None,
    ) -> str:
        if not self.domain or not source.path:
            return ""

        query: dict[str, Any] = {
            "w": request.target_width,
            "h": request.target_height,
            "q": request.quality,
            "fit": "crop",
        }
        final_format = (request.format or source.extension or "").lower()
        if request.interlace and final_format in _PROGRESSIVE_FORMATS:
            query["fm"] = "pjpg"
        elif request.format:
            query["fm"] = request.format
        if source.focal_point:
            query["crop"] = "focalpoint"
            query["fp-x"] = source.focal_point.x
            query["fp-y"] = source.focal_point.y
        query.update(params or {})

        if urlsplit(source.path).scheme in ("http", "https"):
            # Web proxy source: the whole origin URL is the encoded path
            path = quote(source.path, safe="")
        else:
            path = quote(source.path.lstrip("/"))
        return f"{self.scheme}://{self.domain}/{path}?{urlencode(query)}"

    def get_webp_url(self, url: str) -> str:
        """Swap the output format parameter for fm=webp."""
        if not url:
            return ""
        parts = urlsplit(url)
        query = [(k, v) for k, v in parse_qsl(parts.query) if k != "fm"]
        query.append(("fm", "webp"))
        return urlunsplit(parts._replace(query=urlencode(query)))
