"""Plugin settings."""

from dataclasses import dataclass, field
from typing import Any

from .variant import VariantConfigError, VariantSpec


@dataclass
class Settings:
    """Settings consumed by the engine. Variants are validated on construction via from_dict."""
    default_variants: list[VariantSpec]
    create_color_palette: bool = True
    create_placeholder_silhouettes: bool = False
    transform_method: str = "imgix"                 # Registered transform client name
    transform_params: dict[str, Any] = field(default_factory=dict)  # Extra params for every transform URL
    imgix_domain: str | None = None
    thumbor_base_url: str | None = None
    thumbor_security_key: str | None = None
    site_url: str = ""                              # Base for relative URLs in remote size lookups
    remote_file_size_timeout: float = 10.0

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Settings":
        """Build settings from the camelCase config form. Unknown keys are ignored."""
        raw_variants = data.get("defaultVariants") or []
        if not isinstance(raw_variants, list):
            raise VariantConfigError("defaultVariants must be a list")

        return Settings(
            default_variants=[VariantSpec.from_dict(v) for v in raw_variants],
            create_color_palette=bool(data.get("createColorPalette", True)),
            create_placeholder_silhouettes=bool(data.get("createPlaceholderSilhouettes", False)),
            transform_method=data.get("transformMethod") or "imgix",
            transform_params=dict(data.get("transformParams") or {}),
            imgix_domain=data.get("imgixDomain"),
            thumbor_base_url=data.get("thumborBaseUrl"),
            thumbor_security_key=data.get("thumborSecurityKey"),
            site_url=data.get("siteUrl") or "",
            remote_file_size_timeout=float(data.get("remoteFileSizeTimeout", 10.0)),
        )
