import pytest

from engine.engine_config import BASE_DPI, resolve_level


@pytest.mark.parametrize("name, quality, dpi, jpeg_q", [
    ("low", 0.85, 150, 85),
    ("medium", 0.65, 120, 65),
    ("high", 0.40, 90, 40),
])
def test_resolve_known_levels(name, quality, dpi, jpeg_q):
    preset = resolve_level(name)
    assert preset.name == name
    assert preset.quality == pytest.approx(quality)
    assert preset.scale == pytest.approx(dpi / BASE_DPI)
    assert preset.jpeg_quality == jpeg_q


@pytest.mark.parametrize("name", [None, "", "ultra", "HIGH", "none"])
def test_unknown_level_falls_back_to_medium(name):
    assert resolve_level(name) == resolve_level("medium")


def test_high_is_the_most_aggressive_level():
    low, high = resolve_level("low"), resolve_level("high")
    assert high.quality < low.quality
    assert high.scale < low.scale


def test_preset_is_immutable():
    preset = resolve_level("low")
    with pytest.raises(Exception):
        preset.quality = 0.1
