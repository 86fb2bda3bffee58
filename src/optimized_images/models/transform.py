"""Transform request model."""

from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class TransformRequest:
    """A concrete transform sent to the transform backend."""
    target_width: int            # variant width x retina size
    target_height: int           # target_width / aspect_ratio, truncated
    format: str | None           # None = keep source format
    quality: int
    interlace: bool
    source_width: int            # pre-retina variant width (srcset slot)
    aspect_ratio: Fraction
