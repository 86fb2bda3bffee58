from fractions import Fraction

from optimized_images.models import FocalPoint, SourceImage
from optimized_images.services import PlaceholderGenerator

TEMP_PATH = "/tmp/placeholder-test.jpg"


def test_generate_all_outputs(placeholder_client, source_image):
    generator = PlaceholderGenerator(
        placeholder_client, create_color_palette=True, create_placeholder_silhouettes=True
    )
    result = generator.generate(source_image, Fraction(16, 9))

    assert result.placeholder == "BASE64DATA"
    assert result.color_palette == ["#112233", "#445566"]
    assert result.placeholder_svg == "%3Csvg%3E%3C/svg%3E"
    placeholder_client.generate_placeholder_image.assert_called_once_with(TEMP_PATH, Fraction(16, 9), "center-center")
    placeholder_client.release_temp_placeholder_image.assert_called_once_with(TEMP_PATH)


def test_disabled_steps_are_not_run(placeholder_client, source_image):
    generator = PlaceholderGenerator(
        placeholder_client, create_color_palette=False, create_placeholder_silhouettes=False
    )
    result = generator.generate(source_image, Fraction(16, 9))

    assert result.placeholder == "BASE64DATA"
    assert result.color_palette == []
    assert result.placeholder_svg == ""
    placeholder_client.generate_color_palette.assert_not_called()
    placeholder_client.generate_placeholder_svg.assert_not_called()


def test_missing_temp_image_aborts(placeholder_client, source_image):
    placeholder_client.create_temp_placeholder_image.return_value = ""
    result = PlaceholderGenerator(placeholder_client).generate(source_image, Fraction(16, 9))

    assert result.placeholder == ""
    assert result.color_palette == []
    placeholder_client.generate_placeholder_image.assert_not_called()
    placeholder_client.release_temp_placeholder_image.assert_not_called()


def test_temp_image_error_aborts(placeholder_client, source_image):
    placeholder_client.create_temp_placeholder_image.side_effect = OSError("disk full")
    result = PlaceholderGenerator(placeholder_client).generate(source_image, Fraction(16, 9))

    assert result.placeholder == ""
    placeholder_client.generate_placeholder_image.assert_not_called()


def test_failed_step_degrades_only_its_field(placeholder_client, source_image):
    placeholder_client.generate_color_palette.side_effect = ValueError("bad image")
    generator = PlaceholderGenerator(
        placeholder_client, create_color_palette=True, create_placeholder_silhouettes=True
    )
    result = generator.generate(source_image, Fraction(16, 9))

    assert result.placeholder == "BASE64DATA"
    assert result.color_palette == []
    assert result.placeholder_svg == "%3Csvg%3E%3C/svg%3E"
    placeholder_client.release_temp_placeholder_image.assert_called_once_with(TEMP_PATH)


def test_temp_image_released_when_raster_fails(placeholder_client, source_image):
    placeholder_client.generate_placeholder_image.side_effect = RuntimeError("boom")
    result = PlaceholderGenerator(placeholder_client).generate(source_image, Fraction(16, 9))

    assert result.placeholder == ""
    assert result.color_palette == ["#112233", "#445566"]
    placeholder_client.release_temp_placeholder_image.assert_called_once_with(TEMP_PATH)


def test_release_failure_is_not_raised(placeholder_client, source_image):
    placeholder_client.release_temp_placeholder_image.side_effect = PermissionError("locked")
    result = PlaceholderGenerator(placeholder_client).generate(source_image, Fraction(16, 9))
    assert result.placeholder == "BASE64DATA"


def test_focal_point_position(placeholder_client):
    source = SourceImage(extension="jpg", width=1600, height=900, focal_point=FocalPoint(x=0.1, y=0.5))
    PlaceholderGenerator(placeholder_client).generate(source, Fraction(4, 3))

    placeholder_client.create_temp_placeholder_image.assert_called_once_with(source, Fraction(4, 3), "50%-10%")


def test_explicit_position(placeholder_client, source_image):
    PlaceholderGenerator(placeholder_client).generate(source_image, Fraction(4, 3), "top-left")
    placeholder_client.create_temp_placeholder_image.assert_called_once_with(source_image, Fraction(4, 3), "top-left")
