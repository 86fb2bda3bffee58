"""Source image - the original asset the variants are derived from."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FocalPoint:
    """Normalized subject coordinate, 0..1 on both axes."""
    x: float
    y: float

    @staticmethod
    def from_dict(data: dict[str, Any] | None) -> "FocalPoint | None":
        if not data:
            return None
        return FocalPoint(x=float(data["x"]), y=float(data["y"]))

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class SourceImage:
    """Read-only view of the original image as the asset store reports it."""

    extension: str
    width: int
    height: int
    focal_point: FocalPoint | None = None
    path: str = ""               # Storage path or absolute URL of the original
