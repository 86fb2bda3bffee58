import json

import pytest

from optimized_images import config
from optimized_images.models import Settings, VariantConfigError


def test_settings_from_dict():
    settings = Settings.from_dict({
        "defaultVariants": [{"width": 400, "quality": 80, "aspectRatioX": 1, "aspectRatioY": 1}],
        "createColorPalette": False,
        "transformMethod": "thumbor",
        "thumborBaseUrl": "https://thumbor.example.com",
        "transformParams": {"auto": "compress"},
        "somethingElse": True,
    })

    assert [v.width for v in settings.default_variants] == [400]
    assert settings.create_color_palette is False
    assert settings.create_placeholder_silhouettes is False
    assert settings.transform_method == "thumbor"
    assert settings.transform_params == {"auto": "compress"}
    assert settings.site_url == ""


def test_settings_rejects_non_list_variants():
    with pytest.raises(VariantConfigError):
        Settings.from_dict({"defaultVariants": {"width": 400}})


def test_settings_rejects_invalid_variant():
    with pytest.raises(VariantConfigError):
        Settings.from_dict({"defaultVariants": [{"width": 0, "quality": 80}]})


def test_load_settings_uses_default_variants(monkeypatch):
    monkeypatch.setattr(config, "VARIANTS_FILE", None)
    settings = config.load_settings()

    assert [v.width for v in settings.default_variants] == [1200, 992, 768, 576]
    assert all(v.quality == 82 and v.format == "jpg" for v in settings.default_variants)


def test_load_settings_reads_variants_file(monkeypatch, tmp_path):
    path = tmp_path / "variants.json"
    path.write_text(json.dumps([{"width": 640, "quality": 70, "useAspectRatio": False}]))
    monkeypatch.setattr(config, "VARIANTS_FILE", str(path))
    monkeypatch.setattr(config, "TRANSFORM_METHOD", "thumbor")

    settings = config.load_settings()

    assert len(settings.default_variants) == 1
    assert settings.default_variants[0].aspect_ratio is None
    assert settings.transform_method == "thumbor"


@pytest.mark.parametrize("value, expected", [
    ("true", True),
    ("1", True),
    ("off", False),
    ("no", False),
    ("", True),
])
def test_env_bool(monkeypatch, value, expected):
    monkeypatch.setenv("IMAGE_OPTIMIZE_TEST_FLAG", value)
    assert config._env_bool("IMAGE_OPTIMIZE_TEST_FLAG", True) is expected


def test_env_bool_unset(monkeypatch):
    monkeypatch.delenv("IMAGE_OPTIMIZE_TEST_FLAG", raising=False)
    assert config._env_bool("IMAGE_OPTIMIZE_TEST_FLAG", False) is False
