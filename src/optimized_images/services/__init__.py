"""Business logic services."""

from .placeholder import PlaceholderGenerator, PlaceholderResult
from .transform import TransformInvoker

__all__ = ["PlaceholderGenerator", "PlaceholderResult", "TransformInvoker"]
