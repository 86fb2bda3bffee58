import json
import os

from dotenv import load_dotenv

from .models.config import Settings

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Transform backend - loaded from .env
TRANSFORM_METHOD = os.getenv("IMAGE_OPTIMIZE_TRANSFORM_METHOD", "imgix")
IMGIX_DOMAIN = os.getenv("IMGIX_DOMAIN")
THUMBOR_BASE_URL = os.getenv("THUMBOR_BASE_URL")
THUMBOR_SECURITY_KEY = os.getenv("THUMBOR_SECURITY_KEY")
SITE_URL = os.getenv("SITE_URL", "")

# Placeholder generation
CREATE_COLOR_PALETTE = _env_bool("IMAGE_OPTIMIZE_CREATE_COLOR_PALETTE", True)
CREATE_PLACEHOLDER_SILHOUETTES = _env_bool("IMAGE_OPTIMIZE_CREATE_PLACEHOLDER_SILHOUETTES", False)

# JSON list of variant dicts; DEFAULT_VARIANTS when unset
VARIANTS_FILE = os.getenv("IMAGE_OPTIMIZE_VARIANTS_FILE")

REMOTE_FILE_SIZE_TIMEOUT = float(os.getenv("REMOTE_FILE_SIZE_TIMEOUT", "10"))

# Stock responsive breakpoints, 16:9 jpg
DEFAULT_VARIANTS: list[dict] = [
    {"width": 1200, "useAspectRatio": True, "aspectRatioX": 16, "aspectRatioY": 9, "retinaSizes": [1], "quality": 82, "format": "jpg"},
    {"width": 992, "useAspectRatio": True, "aspectRatioX": 16, "aspectRatioY": 9, "retinaSizes": [1], "quality": 82, "format": "jpg"},
    {"width": 768, "useAspectRatio": True, "aspectRatioX": 16, "aspectRatioY": 9, "retinaSizes": [1], "quality": 82, "format": "jpg"},
    {"width": 576, "useAspectRatio": True, "aspectRatioX": 16, "aspectRatioY": 9, "retinaSizes": [1], "quality": 82, "format": "jpg"},
]


def load_variants(path: str | None = None) -> list[dict]:
    """Read variant dicts from a JSON file, or the stock list when no file is configured."""
    path = path or VARIANTS_FILE
    if not path:
        return DEFAULT_VARIANTS
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_settings() -> Settings:
    """Build validated Settings from the environment."""
    return Settings.from_dict({
        "defaultVariants": load_variants(),
        "createColorPalette": CREATE_COLOR_PALETTE,
        "createPlaceholderSilhouettes": CREATE_PLACEHOLDER_SILHOUETTES,
        "transformMethod": TRANSFORM_METHOD,
        "imgixDomain": IMGIX_DOMAIN,
        "thumborBaseUrl": THUMBOR_BASE_URL,
        "thumborSecurityKey": THUMBOR_SECURITY_KEY,
        "siteUrl": SITE_URL,
        "remoteFileSizeTimeout": REMOTE_FILE_SIZE_TIMEOUT,
    })
