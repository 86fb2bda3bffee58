"""Thumbor transform client - path-based URLs, optionally HMAC signed."""

import base64
import hashlib
import hmac
import re
from typing import Any

from . import register
from .base import TransformClient
from ...models.config import Settings
from ...models.source import SourceImage
from ...models.transform import TransformRequest

_FORMAT_FILTER = re.compile(r"format\([a-z]+\)")


@register("thumbor")
class ThumborTransformClient(TransformClient):
    """Builds thumbor URLs: <base>/<signature>/<w>x<h>/[smart/]filters:.../<image>."""

    def __init__(self, base_url: str | None, security_key: str | None = None):
        self.base_url = (base_url or "").rstrip("/")
        self.security_key = security_key

    @classmethod
    def from_settings(cls, settings: Settings) -> "ThumborTransformClient":
        return cls(settings.thumbor_base_url, settings.thumbor_security_key)

    def get_transform_url(
        self,
        source: SourceImage,
        request: TransformRequest,
        params: dict[str, Any] | None = None,
    ) -> str:
        if not self.base_url or not source.path:
            return ""

        filters = [f"quality({request.quality})"]
        if request.format:
            filters.append(f"format({request.format})")
        for name, value in (params or {}).items():
            filters.append(f"{name}({value})")

        segments = [f"{request.target_width}x{request.target_height}"]
        if source.focal_point:
            left = int(source.focal_point.x * source.width)
            top = int(source.focal_point.y * source.height)
            filters.append(f"focal({left}x{top}:{left + 1}x{top + 1})")
        else:
            segments.append("smart")
        segments.append("filters:" + ":".join(filters))
        segments.append(source.path.lstrip("/"))

        path = "/".join(segments)
        return f"{self.base_url}/{self._sign(path)}/{path}"

    def get_webp_url(self, url: str) -> str:
        """Rewrite the format filter to webp and re-sign the path."""
        prefix = self.base_url + "/"
        if not url or not self.base_url or not url.startswith(prefix):
            return ""
        _, _, path = url[len(prefix):].partition("/")
        if _FORMAT_FILTER.search(path):
            path = _FORMAT_FILTER.sub("format(webp)", path, count=1)
        elif "filters:" in path:
            path = path.replace("filters:", "filters:format(webp):", 1)
        else:
            return ""
        return f"{prefix}{self._sign(path)}/{path}"

    def _sign(self, path: str) -> str:
        if not self.security_key:
            return "unsafe"
        digest = hmac.new(self.security_key.encode(), path.encode(), hashlib.sha1).digest()
        return base64.urlsafe_b64encode(digest).decode()
