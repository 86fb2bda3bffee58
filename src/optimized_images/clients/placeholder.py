"""Placeholder image backends."""

import base64
import os
import tempfile
from abc import ABC, abstractmethod
from fractions import Fraction
from io import BytesIO
from pathlib import Path

import cv2
import numpy as np
import requests
from PIL import Image, ImageOps

from ..models.source import SourceImage
from ..utils import encode_optimized_svg_data_uri, parse_position

TEMP_PLACEHOLDER_WIDTH = 300
TEMP_PLACEHOLDER_QUALITY = 75
PLACEHOLDER_WIDTH = 16
PLACEHOLDER_QUALITY = 50
PALETTE_SIZE = 5


class PlaceholderError(Exception):
    """Failed to produce a placeholder representation."""

    pass


class PlaceholderClient(ABC):
    """Produces placeholder representations from a temporary down-sampled raster."""

    @abstractmethod
    def create_temp_placeholder_image(
        self, source: SourceImage, aspect_ratio: Fraction, position: str
    ) -> str:
        """Write a temp raster fitted to aspect_ratio at position. Returns its path or ""."""
        pass

    @abstractmethod
    def generate_placeholder_image(
        self, temp_path: str, aspect_ratio: Fraction, position: str
    ) -> str:
        """Return a tiny base64-encoded JPEG."""
        pass

    @abstractmethod
    def generate_color_palette(self, temp_path: str) -> list[str]:
        """Return hex colours, dominant first."""
        pass

    @abstractmethod
    def generate_placeholder_svg(self, temp_path: str) -> str:
        """Return a data-URI-encoded SVG silhouette."""
        pass

    def release_temp_placeholder_image(self, temp_path: str) -> None:
        """Delete the temp raster."""
        Path(temp_path).unlink(missing_ok=True)


class PillowPlaceholderClient(PlaceholderClient):
    """Placeholder backend built on Pillow, with OpenCV tracing for silhouettes."""

    def __init__(
        self,
        temp_dir: str | None = None,
        palette_size: int = PALETTE_SIZE,
        silhouette_color: str = "#000",
        min_area_ratio: float = 0.001,
        epsilon: float = 1.0,
        download_timeout: int = 30,
    ):
        self.temp_dir = temp_dir
        self.palette_size = palette_size
        self.silhouette_color = silhouette_color
        self.min_area_ratio = min_area_ratio
        self.epsilon = epsilon
        self.download_timeout = download_timeout

    def create_temp_placeholder_image(
        self, source: SourceImage, aspect_ratio: Fraction, position: str
    ) -> str:
        with self._open_source(source) as opened:
            img = ImageOps.exif_transpose(opened).convert("RGB")

        width = TEMP_PLACEHOLDER_WIDTH
        height = max(1, int(width / float(aspect_ratio)))
        img = ImageOps.fit(img, (width, height), method=Image.LANCZOS, centering=parse_position(position))

        fd, temp_path = tempfile.mkstemp(prefix="placeholder-", suffix=".jpg", dir=self.temp_dir)
        os.close(fd)
        try:
            img.save(temp_path, format="JPEG", quality=TEMP_PLACEHOLDER_QUALITY)
        except OSError:
            Path(temp_path).unlink(missing_ok=True)
            raise
        return temp_path

    def generate_placeholder_image(
        self, temp_path: str, aspect_ratio: Fraction, position: str
    ) -> str:
        width = PLACEHOLDER_WIDTH
        height = max(1, int(width / float(aspect_ratio)))
        with Image.open(temp_path) as img:
            small = ImageOps.fit(
                img.convert("RGB"), (width, height), method=Image.LANCZOS, centering=parse_position(position)
            )

        output = BytesIO()
        small.save(output, format="JPEG", quality=PLACEHOLDER_QUALITY, optimize=True)
        return base64.b64encode(output.getvalue()).decode("ascii")

    def generate_color_palette(self, temp_path: str) -> list[str]:
        with Image.open(temp_path) as img:
            quantized = img.convert("RGB").quantize(colors=self.palette_size)

        palette = quantized.getpalette()
        counts = sorted(quantized.getcolors() or [], reverse=True)  # (pixel count, palette index)
        colors = []
        for _, index in counts:
            r, g, b = palette[index * 3:index * 3 + 3]
            colors.append(f"#{r:02x}{g:02x}{b:02x}")
        return colors

    def generate_placeholder_svg(self, temp_path: str) -> str:
        with Image.open(temp_path) as img:
            gray = np.array(img.convert("L"))

        h, w = gray.shape
        gray = cv2.GaussianBlur(gray, (5, 5), 0)
        # Dark regions become the foreground
        _, mask = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY_INV + cv2.THRESH_OTSU)
        contours, _ = cv2.findContours(mask, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)

        min_area = w * h * self.min_area_ratio
        paths = []
        for contour in contours:
            if cv2.contourArea(contour) < min_area:
                continue
            points = cv2.approxPolyDP(contour, self.epsilon, True).reshape(-1, 2)
            if len(points) < 3:
                continue
            paths.append("M" + " L".join(f"{x} {y}" for x, y in points) + "Z")

        svg = (
            f"<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 {w} {h}'>"
            f"<path fill='{self.silhouette_color}' fill-rule='evenodd' d='{' '.join(paths)}'/>"
            "</svg>"
        )
        return encode_optimized_svg_data_uri(svg)

    def _open_source(self, source: SourceImage) -> Image.Image:
        """Open the source from a local path, or download it when it is a URL."""
        if not source.path:
            raise PlaceholderError("Source image has no path")

        if source.path.startswith(("http://", "https://")):
            try:
                response = requests.get(source.path, timeout=self.download_timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                raise PlaceholderError(f"Failed to download {source.path}: {e}")
            return Image.open(BytesIO(response.content))

        if not os.path.isfile(source.path):
            raise PlaceholderError(f"Source image not found: {source.path}")
        return Image.open(source.path)
