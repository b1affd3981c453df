# test/test_settings.py
import pytest

from buffcurve.config import (
    DEFAULT_SETTINGS,
    Settings,
    get_settings,
    load_settings_from_yaml,
    reset_settings,
    set_settings,
    settings_from_dict,
)


def test_defaults():
    s = DEFAULT_SETTINGS
    assert s.simulation.max_time == 300
    assert s.simulation.cast_offset == 10
    assert s.cooldown.base == 30
    assert s.breakpoints[0] == 30 and s.breakpoints[-1] == 300
    assert s.display.dps_multiplier == 10
    assert s.groups.max_groups == 4
    assert s.groups.max_equations_per_group == 4
    assert len(s.groups.colors) == 4


def test_load_partial_yaml_overlays_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "simulation:\n"
        "  max_time: 120\n"
        "cooldown:\n"
        "  base: 27.5\n"
        "breakpoints: [30, 60, 120]\n"
        "groups:\n"
        "  colors: ['#000', '#111']\n",
        encoding="utf-8",
    )
    s = load_settings_from_yaml(path)
    assert isinstance(s, Settings)
    assert s.simulation.max_time == 120
    assert s.simulation.cast_offset == 10
    assert s.cooldown.base == 27.5
    assert s.breakpoints == (30, 60, 120)
    assert s.groups.colors == ("#000", "#111")
    assert s.groups.max_groups == 4


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings_from_yaml(path) == DEFAULT_SETTINGS


def test_missing_file_raises():
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_settings_from_yaml("nonexistent.yaml")


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("{ invalid yaml syntax: [", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to parse YAML"):
        load_settings_from_yaml(path)


def test_non_mapping_top_level_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings_from_yaml(path)


@pytest.mark.parametrize(
    "data",
    [
        {"unknown": {}},
        {"simulation": {"nope": 1}},
        {"simulation": {"max_time": 12.5}},
        {"simulation": {"max_time": "300"}},
        {"cooldown": {"base": True}},
        {"display": {"title": "Stellar DPS"}},
        {"display": {"dps_multiplier": "10"}},
        {"breakpoints": [30, -1]},
        {"breakpoints": 30},
        {"groups": ["a"]},
    ],
)
def test_ill_typed_settings_rejected(data):
    with pytest.raises(ValueError):
        settings_from_dict(data)


def test_active_settings_get_set_reset():
    custom = settings_from_dict({"simulation": {"max_time": 60}})
    try:
        set_settings(custom)
        assert get_settings().simulation.max_time == 60
    finally:
        reset_settings()
    assert get_settings() is DEFAULT_SETTINGS
