"""Variant specification - a target rendering configuration."""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any


class VariantConfigError(ValueError):
    """A variant definition is malformed."""

    def __init__(self, message: str, variant: dict[str, Any] | None = None):
        self.variant = variant
        super().__init__(message)


def to_fraction(value: Any) -> Fraction:
    """Parse a numeric value (int, float or numeric string) as an exact fraction.

    Floats go through str() so 1.15 becomes 23/20 rather than its binary value.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    return Fraction(str(value).strip())


def fraction_to_json(value: Fraction) -> int | float:
    """Render a fraction as a JSON number (int when whole)."""
    if value.denominator == 1:
        return value.numerator
    return float(value)


@dataclass(frozen=True)
class VariantSpec:
    """One variant: base width, output format/quality, aspect ratio, retina densities."""

    width: int
    quality: int
    format: str | None = None            # None keeps the source image format
    use_aspect_ratio: bool = True
    aspect_ratio_x: Fraction | None = None
    aspect_ratio_y: Fraction | None = None
    retina_sizes: tuple[Fraction, ...] = (Fraction(1),)

    @property
    def aspect_ratio(self) -> Fraction | None:
        """Configured aspect ratio, or None when the source ratio is used."""
        if not self.use_aspect_ratio:
            return None
        return self.aspect_ratio_x / self.aspect_ratio_y

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "VariantSpec":
        """
        Build a validated variant from its persisted camelCase form.

        Expected keys: width, quality, format, useAspectRatio, aspectRatioX,
        aspectRatioY, retinaSizes. Raises VariantConfigError on bad input.
        """
        if not isinstance(data, dict):
            raise VariantConfigError(f"Variant must be a mapping, got {type(data).__name__}")

        width = _positive_int(data, "width")
        quality = _positive_int(data, "quality")
        if quality > 100:
            raise VariantConfigError(f"Variant quality must be 1-100, got {quality}", data)

        fmt = data.get("format") or None
        if fmt is not None:
            fmt = str(fmt).lower()

        use_aspect_ratio = bool(data.get("useAspectRatio", True))
        ratio_x = ratio_y = None
        if use_aspect_ratio:
            ratio_x = _positive_fraction(data, "aspectRatioX")
            ratio_y = _positive_fraction(data, "aspectRatioY")

        raw_sizes = data.get("retinaSizes") or [1]
        if isinstance(raw_sizes, (str, int, float)):
            raw_sizes = [raw_sizes]
        retina_sizes = []
        for raw in raw_sizes:
            try:
                size = to_fraction(raw)
            except (ValueError, ZeroDivisionError):
                raise VariantConfigError(f"Invalid retina size: {raw!r}", data)
            if size <= 0:
                raise VariantConfigError(f"Retina size must be positive, got {raw!r}", data)
            retina_sizes.append(size)

        return VariantSpec(
            width=width,
            quality=quality,
            format=fmt,
            use_aspect_ratio=use_aspect_ratio,
            aspect_ratio_x=ratio_x,
            aspect_ratio_y=ratio_y,
            retina_sizes=tuple(retina_sizes),
        )

    def to_dict(self) -> dict[str, Any]:
        """Persisted camelCase form, accepted back by from_dict."""
        data: dict[str, Any] = {
            "width": self.width,
            "format": self.format,
            "quality": self.quality,
            "useAspectRatio": self.use_aspect_ratio,
            "retinaSizes": [fraction_to_json(size) for size in self.retina_sizes],
        }
        if self.use_aspect_ratio:
            data["aspectRatioX"] = fraction_to_json(self.aspect_ratio_x)
            data["aspectRatioY"] = fraction_to_json(self.aspect_ratio_y)
        return data


def _positive_int(data: dict[str, Any], key: str) -> int:
    if key not in data or data[key] in (None, ""):
        raise VariantConfigError(f"Variant is missing required '{key}'", data)
    try:
        value = int(to_fraction(data[key]))
    except (ValueError, ZeroDivisionError):
        raise VariantConfigError(f"Variant '{key}' must be an integer, got {data[key]!r}", data)
    if value <= 0:
        raise VariantConfigError(f"Variant '{key}' must be positive, got {value}", data)
    return value


def _positive_fraction(data: dict[str, Any], key: str) -> Fraction:
    if key not in data or data[key] in (None, ""):
        raise VariantConfigError(
            f"Variant is missing required '{key}' (useAspectRatio is enabled)", data
        )
    try:
        value = to_fraction(data[key])
    except (ValueError, ZeroDivisionError):
        raise VariantConfigError(f"Variant '{key}' must be a number, got {data[key]!r}", data)
    if value <= 0:
        raise VariantConfigError(f"Variant '{key}' must be positive, got {data[key]!r}", data)
    return value
