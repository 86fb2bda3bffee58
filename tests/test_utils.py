import pytest

from optimized_images.models import FocalPoint
from optimized_images.utils import (
    can_manipulate_as_image,
    encode_optimized_svg_data_uri,
    focal_point_position,
    human_file_size,
    parse_position,
)


@pytest.mark.parametrize("size, expected", [
    (23, "23.0B"),
    (1500, "1.5K"),
    (1024, "1.0K"),
    (1048576, "1.0M"),
])
def test_human_file_size(size, expected):
    assert human_file_size(size) == expected


def test_human_file_size_decimals():
    assert human_file_size(1500, 2) == "1.46K"


def test_encode_optimized_svg_data_uri():
    svg = "<svg xmlns='http://www.w3.org/2000/svg' width='4' />"
    assert encode_optimized_svg_data_uri(svg) == (
        "%3Csvg xmlns=%27http://www.w3.org/2000/svg%27 width=%274%27 /%3E"
    )


def test_focal_point_position():
    assert focal_point_position(None) == "center-center"
    assert focal_point_position(FocalPoint(x=0.25, y=0.6)) == "60%-25%"


@pytest.mark.parametrize("position, expected", [
    ("center-center", (0.5, 0.5)),
    ("top-left", (0.0, 0.0)),
    ("bottom-right", (1.0, 1.0)),
    ("60%-25%", (0.25, 0.6)),
    ("150%-oops", (0.5, 1.0)),
    (None, (0.5, 0.5)),
])
def test_parse_position(position, expected):
    assert parse_position(position) == expected


def test_can_manipulate_as_image():
    assert can_manipulate_as_image("jpg")
    assert can_manipulate_as_image("WEBP")
    assert can_manipulate_as_image(".svg")
    assert not can_manipulate_as_image("tiff")
    assert not can_manipulate_as_image("")
    assert not can_manipulate_as_image(None)
