"""Variant expansion - variants x retina sizes into transform requests."""

import logging
from fractions import Fraction

from ..models.source import SourceImage
from ..models.transform import TransformRequest
from ..models.variant import VariantSpec
from ..utils import can_manipulate_as_image

logger = logging.getLogger(__name__)


class VariantExpander:
    """Expand variant specs into concrete, ordered transform requests."""

    def __init__(self, interlace: bool = False):
        self.interlace = interlace

    def expand(self, variants: list[VariantSpec], source: SourceImage) -> list[TransformRequest]:
        """
        Expand variants in input order, each over its retina sizes in input order.

        Pairs whose output format or source format cannot be manipulated as an
        image, or whose source has no height, produce nothing. Variants using
        the source aspect ratio also need a source width.
        """
        transform_requests: list[TransformRequest] = []
        for variant in variants:
            expanded = []
            for retina_size in variant.retina_sizes or (Fraction(1),):
                request = self._expand_one(variant, retina_size, source)
                if request is not None:
                    expanded.append(request)
            logger.info(
                f"Expanded variant width={variant.width} format={variant.format or source.extension} "
                f"into {len(expanded)} transform request(s)"
            )
            transform_requests.extend(expanded)
        return transform_requests

    def _expand_one(
        self, variant: VariantSpec, retina_size: Fraction, source: SourceImage
    ) -> TransformRequest | None:
        final_format = variant.format or source.extension
        if not (
            can_manipulate_as_image(final_format)
            and can_manipulate_as_image(source.extension)
            and source.height > 0
        ):
            logger.debug(
                f"Skipping variant width={variant.width} x{retina_size}: "
                f"format={final_format} source={source.extension} height={source.height}"
            )
            return None

        if variant.use_aspect_ratio:
            aspect_ratio = variant.aspect_ratio
        elif source.width > 0:
            aspect_ratio = Fraction(source.width, source.height)
        else:
            logger.debug(f"Skipping variant width={variant.width} x{retina_size}: source has no width")
            return None

        # Exact arithmetic; both dimensions truncate
        width = int(variant.width * retina_size)
        height = int(width / aspect_ratio)

        return TransformRequest(
            target_width=width,
            target_height=height,
            format=variant.format,
            quality=variant.quality,
            interlace=self.interlace,
            source_width=variant.width,
            aspect_ratio=aspect_ratio,
        )
