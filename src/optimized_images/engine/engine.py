"""Optimized image engine - builds OptimizedImage models for source images."""

import json
import logging
from typing import Any

from ..clients.placeholder import PillowPlaceholderClient, PlaceholderClient
from ..clients.transform import TransformClient, create_transform_client
from ..models.config import Settings
from ..models.optimized_image import OptimizedImage
from ..models.source import SourceImage
from ..models.variant import VariantSpec
from ..services.placeholder import PlaceholderGenerator
from ..services.transform import TransformInvoker
from .expander import VariantExpander

logger = logging.getLogger(__name__)


class OptimizedImagesEngine:
    """Config-driven derivation of responsive image URLs and placeholders."""

    def __init__(
        self,
        settings: Settings,
        transform_client: TransformClient,
        placeholder_client: PlaceholderClient,
        variants: list[VariantSpec] | None = None,
    ):
        self.settings = settings
        # Field-level variants win; none configured falls back to the defaults
        self.variants = variants or settings.default_variants
        self.expander = VariantExpander(interlace=transform_client.supports_interlace)
        self.transforms = TransformInvoker(transform_client, params=settings.transform_params)
        self.placeholders = PlaceholderGenerator(
            placeholder_client,
            create_color_palette=settings.create_color_palette,
            create_placeholder_silhouettes=settings.create_placeholder_silhouettes,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        placeholder_client: PlaceholderClient | None = None,
        variants: list[VariantSpec] | None = None,
    ) -> "OptimizedImagesEngine":
        """Create an engine with the transform client selected by settings."""
        return cls(
            settings,
            create_transform_client(settings),
            placeholder_client or PillowPlaceholderClient(),
            variants=variants,
        )

    def normalize_value(
        self, value: str | dict[str, Any] | None, source: SourceImage | None = None
    ) -> OptimizedImage:
        """
        Build a model from a persisted value, repopulating it when a source image is available.

        Without a source (e.g. an unsaved entity) the model carries the raw persisted data only.
        """
        if isinstance(value, str):
            value = self._decode(value)
        model = OptimizedImage.from_dict(value if isinstance(value, dict) else None)
        self._apply_remote_settings(model)
        if source is not None:
            self.populate(source, model)
        return model

    def build(self, source: SourceImage) -> OptimizedImage:
        """Build a fresh model for a source image."""
        model = OptimizedImage()
        self.populate(source, model)
        return model

    def populate(self, source: SourceImage, model: OptimizedImage) -> OptimizedImage:
        """Reset the model's derived fields and fill them from the variants."""
        model.reset()
        self._apply_remote_settings(model)

        placeholder_made = False
        transform_requests = self.expander.expand(self.variants, source)
        for request in transform_requests:
            model.focal_point = source.focal_point
            model.original_image_width = source.width
            model.original_image_height = source.height

            url, webp_url = self.transforms.resolve(request, source)
            if not url:
                continue

            # Colliding widths overwrite the map entry; the widths list still grows
            model.optimized_image_urls[request.target_width] = url
            model.optimized_webp_image_urls[request.target_width] = webp_url
            model.variant_source_widths.append(request.source_width)

            # Placeholders once, from the first variant that produced a URL
            if not placeholder_made:
                model.placeholder_width = request.target_width
                model.placeholder_height = request.target_height
                placeholders = self.placeholders.generate(source, request.aspect_ratio)
                model.placeholder = placeholders.placeholder
                model.color_palette = placeholders.color_palette
                model.placeholder_svg = placeholders.placeholder_svg
                placeholder_made = True

        logger.info(
            f"Built {len(model.optimized_image_urls)} transform URL(s) from "
            f"{len(transform_requests)} request(s) for {source.path or 'source image'}"
        )
        return model

    def _apply_remote_settings(self, model: OptimizedImage) -> None:
        model.site_url = self.settings.site_url
        model.remote_file_size_timeout = self.settings.remote_file_size_timeout

    def _decode(self, value: str) -> dict[str, Any] | None:
        if not value:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to decode stored optimized image JSON: {e}")
            return None
