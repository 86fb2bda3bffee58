"""Data models."""

from .variant import VariantConfigError, VariantSpec
from .source import FocalPoint, SourceImage
from .transform import TransformRequest
from .config import Settings
from .optimized_image import OptimizedImage, WidthMatch

__all__ = [
    "FocalPoint",
    "OptimizedImage",
    "Settings",
    "SourceImage",
    "TransformRequest",
    "VariantConfigError",
    "VariantSpec",
    "WidthMatch",
]
