"""Responsive image variants and progressive-loading placeholders."""

from .models import (
    FocalPoint,
    OptimizedImage,
    Settings,
    SourceImage,
    TransformRequest,
    VariantConfigError,
    VariantSpec,
    WidthMatch,
)
from .engine import OptimizedImagesEngine, VariantExpander

__all__ = [
    "FocalPoint",
    "OptimizedImage",
    "OptimizedImagesEngine",
    "Settings",
    "SourceImage",
    "TransformRequest",
    "VariantConfigError",
    "VariantExpander",
    "VariantSpec",
    "WidthMatch",
]
