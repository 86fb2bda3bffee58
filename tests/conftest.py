from unittest.mock import Mock

import pytest

from optimized_images.clients.placeholder import PlaceholderClient
from optimized_images.clients.transform import TransformClient
from optimized_images.models import Settings, SourceImage, VariantSpec


class FakeTransformClient(TransformClient):
    """Deterministic backend: encodes the request in the URL."""

    supports_interlace = True

    def __init__(self, empty_widths=()):
        self.empty_widths = set(empty_widths)
        self.calls = []

    @classmethod
    def from_settings(cls, settings):
        return cls()

    def get_transform_url(self, source, request, params=None):
        self.calls.append(request)
        if request.target_width in self.empty_widths:
            return ""
        return (
            f"https://cdn.example.com/{source.path}"
            f"?w={request.target_width}&h={request.target_height}&src={request.source_width}"
        )

    def get_webp_url(self, url):
        return url + "&fm=webp"


@pytest.fixture
def source_image():
    return SourceImage(extension="jpg", width=1600, height=900, path="uploads/photo.jpg")


@pytest.fixture
def retina_variant():
    return VariantSpec.from_dict({
        "width": 400,
        "format": None,
        "quality": 80,
        "aspectRatioX": 16,
        "aspectRatioY": 9,
        "retinaSizes": [1, 2],
    })


@pytest.fixture
def settings(retina_variant):
    return Settings(
        default_variants=[retina_variant],
        create_color_palette=True,
        create_placeholder_silhouettes=True,
    )


@pytest.fixture
def transform_client():
    return FakeTransformClient()


@pytest.fixture
def placeholder_client():
    client = Mock(spec=PlaceholderClient)
    client.create_temp_placeholder_image.return_value = "/tmp/placeholder-test.jpg"
    client.generate_placeholder_image.return_value = "BASE64DATA"
    client.generate_color_palette.return_value = ["#112233", "#445566"]
    client.generate_placeholder_svg.return_value = "%3Csvg%3E%3C/svg%3E"
    return client


@pytest.fixture
def transform_client_factory():
    return FakeTransformClient
