from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from .models.source import FocalPoint

# Web-safe formats the transform backends can manipulate
MANIPULABLE_IMAGE_FORMATS = frozenset({"jpg", "jpeg", "png", "gif", "webp", "svg"})

DEFAULT_POSITION = "center-center"

_POSITION_WORDS = {
    "top": 0.0,
    "left": 0.0,
    "center": 0.5,
    "bottom": 1.0,
    "right": 1.0,
}


def can_manipulate_as_image(extension: str | None) -> bool:
    """Whether a file extension/format can be transformed as an image."""
    if not extension:
        return False
    return extension.lower().lstrip(".") in MANIPULABLE_IMAGE_FORMATS


def human_file_size(size: int | float, decimals: int = 1) -> str:
    """Format a byte count with a one-letter unit.

    The unit is picked from the number of decimal digits, so 1500 -> "1.5K"
    and 23 -> "23.0B".
    """
    units = "BKMGTP"
    factor = min((len(str(int(size))) - 1) // 3, len(units) - 1)
    return f"{size / pow(1024, factor):.{decimals}f}{units[factor]}"


def encode_optimized_svg_data_uri(svg: str) -> str:
    """URL-encode SVG markup for a data URI, keeping the common safe characters readable."""
    return quote(svg, safe=" =:/")


def focal_point_position(focal_point: "FocalPoint | None") -> str:
    """Convert a focal point to a "<vertical>-<horizontal>" position string.

    Example: FocalPoint(x=0.25, y=0.6) -> "60%-25%"
    """
    if focal_point is None:
        return DEFAULT_POSITION
    return f"{round(focal_point.y * 100)}%-{round(focal_point.x * 100)}%"


def parse_position(position: str | None) -> tuple[float, float]:
    """Parse a position string into (x, y) centering factors in 0..1.

    Accepts named positions ("top-left", "center-center") and the percentage
    form produced by focal_point_position. Unknown parts fall back to center.
    """
    vertical, _, horizontal = (position or DEFAULT_POSITION).partition("-")
    return _position_part(horizontal), _position_part(vertical)


def _position_part(part: str) -> float:
    part = part.strip().lower()
    if part.endswith("%"):
        try:
            return min(max(float(part[:-1]) / 100, 0.0), 1.0)
        except ValueError:
            return 0.5
    return _POSITION_WORDS.get(part, 0.5)
