"""Placeholder service - builds placeholder representations for one representative variant."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, Iterator

from ..clients.placeholder import PlaceholderClient
from ..models.source import SourceImage
from ..utils import focal_point_position

logger = logging.getLogger(__name__)


@dataclass
class PlaceholderResult:
    """Placeholder outputs; any field left empty when its step failed or was disabled."""
    placeholder: str = ""
    color_palette: list[str] = field(default_factory=list)
    placeholder_svg: str = ""


class PlaceholderGenerator:
    """Generate the raster placeholder, colour palette and silhouette from a temp raster."""

    def __init__(
        self,
        client: PlaceholderClient,
        create_color_palette: bool = True,
        create_placeholder_silhouettes: bool = False,
    ):
        self.client = client
        self.create_color_palette = create_color_palette
        self.create_placeholder_silhouettes = create_placeholder_silhouettes

    def generate(
        self,
        source: SourceImage,
        aspect_ratio: Fraction,
        position: str | None = None,
    ) -> PlaceholderResult:
        """
        Generate placeholders for a source image.

        Each step degrades to an empty value on failure; nothing is raised.
        The temp raster is always released before returning.
        """
        if position is None:
            position = focal_point_position(source.focal_point)

        result = PlaceholderResult()
        with self._temp_placeholder(source, aspect_ratio, position) as temp_path:
            if not temp_path:
                logger.warning(f"No temp placeholder image for {source.path or 'source image'}, skipping placeholders")
                return result

            result.placeholder = self._attempt(
                "placeholder image", self.client.generate_placeholder_image, temp_path, aspect_ratio, position
            ) or ""

            if self.create_color_palette:
                result.color_palette = list(
                    self._attempt("color palette", self.client.generate_color_palette, temp_path) or []
                )

            if self.create_placeholder_silhouettes:
                result.placeholder_svg = self._attempt(
                    "placeholder silhouette", self.client.generate_placeholder_svg, temp_path
                ) or ""

        return result

    @contextmanager
    def _temp_placeholder(
        self, source: SourceImage, aspect_ratio: Fraction, position: str
    ) -> Iterator[str]:
        temp_path = self._attempt(
            "temp placeholder image", self.client.create_temp_placeholder_image, source, aspect_ratio, position
        )
        try:
            yield temp_path or ""
        finally:
            if temp_path:
                try:
                    self.client.release_temp_placeholder_image(temp_path)
                except Exception as e:
                    logger.warning(f"Failed to remove temp placeholder image {temp_path}: {e}")

    def _attempt(self, label: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except Exception as e:
            logger.warning(f"Failed to generate {label}: {e}")
            return None
