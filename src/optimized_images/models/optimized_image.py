"""Optimized image model - derived URLs, placeholders and their query surface."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

from ..clients.remote import DEFAULT_TIMEOUT, get_remote_file_size
from ..utils import encode_optimized_svg_data_uri, human_file_size
from .source import FocalPoint

PLACEHOLDER_BOX_COLOR = "#CCC"


class WidthMatch(Enum):
    EXACT = "width"
    MIN = "minwidth"
    MAX = "maxwidth"


@dataclass
class OptimizedImage:
    """
    Result of one build for a source image.

    optimized_image_urls and optimized_webp_image_urls are keyed by the
    retina-scaled pixel width and share keys and insertion order.
    variant_source_widths holds the pre-retina variant width of every produced
    transform, positionally aligned with the URL maps' insertion order.
    """

    optimized_image_urls: dict[int, str] = field(default_factory=dict)
    optimized_webp_image_urls: dict[int, str] = field(default_factory=dict)
    variant_source_widths: list[int] = field(default_factory=list)
    focal_point: FocalPoint | None = None
    original_image_width: int | None = None
    original_image_height: int | None = None
    placeholder: str = ""
    placeholder_svg: str = ""
    color_palette: list[str] = field(default_factory=list)
    placeholder_width: int | None = None
    placeholder_height: int | None = None
    # Remote size lookup settings, stamped by the engine; not persisted
    site_url: str = field(default="", compare=False, repr=False)
    remote_file_size_timeout: float = field(default=DEFAULT_TIMEOUT, compare=False, repr=False)

    # Srcset selectors

    def src(self) -> str:
        """Return the first image variant URL."""
        return next(iter(self.optimized_image_urls.values()), "")

    def srcset(self) -> str:
        return self.srcset_from(self.optimized_image_urls)

    def srcset_width(self, width: int) -> str:
        """Srcset of the variants whose source width is exactly `width`."""
        return self.filtered_srcset(self.optimized_image_urls, width, WidthMatch.EXACT)

    def srcset_min_width(self, width: int) -> str:
        """Srcset of the variants whose source width is `width` or larger."""
        return self.filtered_srcset(self.optimized_image_urls, width, WidthMatch.MIN)

    def srcset_max_width(self, width: int) -> str:
        """Srcset of the variants whose source width is `width` or smaller."""
        return self.filtered_srcset(self.optimized_image_urls, width, WidthMatch.MAX)

    def srcset_webp(self) -> str:
        return self.srcset_from(self.optimized_webp_image_urls)

    def srcset_width_webp(self, width: int) -> str:
        return self.filtered_srcset(self.optimized_webp_image_urls, width, WidthMatch.EXACT)

    def srcset_min_width_webp(self, width: int) -> str:
        return self.filtered_srcset(self.optimized_webp_image_urls, width, WidthMatch.MIN)

    def srcset_max_width_webp(self, width: int) -> str:
        return self.filtered_srcset(self.optimized_webp_image_urls, width, WidthMatch.MAX)

    @staticmethod
    def srcset_from(urls: dict[int, str]) -> str:
        """Render "<url> <width>w, ..." in insertion order."""
        return ", ".join(f"{url} {width}w" for width, url in urls.items())

    def filtered_srcset(self, urls: dict[int, str], width: int, mode: WidthMatch) -> str:
        return self.srcset_from(self.srcset_subset(urls, width, mode))

    def srcset_subset(self, urls: dict[int, str], width: int, mode: WidthMatch) -> dict[int, str]:
        """
        Select entries of `urls` by the variant source width recorded at the same position.

        Filtering is on the pre-retina width while the returned keys are the
        retina-scaled widths, so one design slot yields every density registered for it.
        """
        entries = list(urls.items())
        subset: dict[int, str] = {}
        for index, source_width in enumerate(self.variant_source_widths):
            if index >= len(entries):
                break
            if _width_matches(source_width, width, mode):
                key, url = entries[index]
                subset.setdefault(key, url)
        return subset

    # Placeholders

    def placeholder_image(self) -> str:
        """Return the base64-encoded placeholder as a data URI."""
        return "data:image/jpeg;base64," + quote(self.placeholder or "", safe="")

    def placeholder_image_size(self) -> str:
        return human_file_size(len(self.placeholder_image()), 1)

    def placeholder_box(self, color: str | None = None) -> str:
        """Return a solid-colour SVG box with the placeholder's intrinsic size."""
        width = self.placeholder_width if self.placeholder_width is not None else 1
        height = self.placeholder_height if self.placeholder_height is not None else 1
        if color is None:
            color = self.color_palette[0] if self.color_palette else PLACEHOLDER_BOX_COLOR
        content = (
            "<svg xmlns='http://www.w3.org/2000/svg' "
            f"width='{width}' "
            f"height='{height}' "
            f"style='background:{color}' "
            "/>"
        )
        return "data:image/svg+xml," + encode_optimized_svg_data_uri(content)

    def placeholder_box_size(self) -> str:
        return human_file_size(len(self.placeholder_box()), 1)

    def placeholder_silhouette(self) -> str:
        """Return the silhouette SVG as a data URI (content is stored pre-encoded)."""
        return "data:image/svg+xml," + (self.placeholder_svg or "")

    def placeholder_silhouette_size(self) -> str:
        return human_file_size(len(self.placeholder_silhouette()), 1)

    def remote_file_size(
        self,
        url: str,
        format_size: bool = True,
        use_head: bool = True,
        site_url: str | None = None,
        timeout: float | None = None,
    ) -> int | str:
        """
        Size of a remote resource; -1 or "unknown" when unavailable.

        site_url and timeout default to the values the engine stamped on the model.
        """
        return get_remote_file_size(
            url,
            format_size=format_size,
            use_head=use_head,
            site_url=self.site_url if site_url is None else site_url,
            timeout=self.remote_file_size_timeout if timeout is None else timeout,
        )

    # Persistence

    def reset(self) -> None:
        """Empty every derived field ahead of a fresh build."""
        self.optimized_image_urls = {}
        self.optimized_webp_image_urls = {}
        self.variant_source_widths = []
        self.placeholder = ""
        self.placeholder_svg = ""
        self.color_palette = []
        self.placeholder_width = None
        self.placeholder_height = None

    def to_dict(self) -> dict[str, Any]:
        """Persisted flat form. URL map keys become strings only once JSON-encoded."""
        return {
            "optimizedImageUrls": dict(self.optimized_image_urls),
            "optimizedWebPImageUrls": dict(self.optimized_webp_image_urls),
            "variantSourceWidths": list(self.variant_source_widths),
            "focalPoint": self.focal_point.to_dict() if self.focal_point else None,
            "originalImageWidth": self.original_image_width,
            "originalImageHeight": self.original_image_height,
            "placeholder": self.placeholder,
            "placeholderSvg": self.placeholder_svg,
            "colorPalette": list(self.color_palette),
            "placeholderWidth": self.placeholder_width,
            "placeholderHeight": self.placeholder_height,
        }

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> "OptimizedImage":
        data = data or {}
        return OptimizedImage(
            optimized_image_urls=_url_map(data.get("optimizedImageUrls")),
            optimized_webp_image_urls=_url_map(data.get("optimizedWebPImageUrls")),
            variant_source_widths=[int(w) for w in data.get("variantSourceWidths") or []],
            focal_point=FocalPoint.from_dict(data.get("focalPoint")),
            original_image_width=_optional_int(data.get("originalImageWidth")),
            original_image_height=_optional_int(data.get("originalImageHeight")),
            placeholder=data.get("placeholder") or "",
            placeholder_svg=data.get("placeholderSvg") or "",
            color_palette=list(data.get("colorPalette") or []),
            placeholder_width=_optional_int(data.get("placeholderWidth")),
            placeholder_height=_optional_int(data.get("placeholderHeight")),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @staticmethod
    def from_json(content: str) -> "OptimizedImage":
        return OptimizedImage.from_dict(json.loads(content))


def _width_matches(source_width: int, width: int, mode: WidthMatch) -> bool:
    if mode is WidthMatch.EXACT:
        return source_width == width
    if mode is WidthMatch.MIN:
        return source_width >= width
    return source_width <= width


def _url_map(data: dict[Any, str] | None) -> dict[int, str]:
    # JSON object keys are strings; widths are ints in memory
    return {int(width): url for width, url in (data or {}).items()}


def _optional_int(value: Any) -> int | None:
    if value in (None, ""):
        return None
    return int(value)
