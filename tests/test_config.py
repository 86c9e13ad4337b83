from __future__ import annotations

import json

import pytest

from camera_rig.core.config import ConfigError, RigConfig, load_config


def test_defaults_are_valid() -> None:
    c = RigConfig()
    assert c.zoom_speed == 10.0
    assert c.min_distance == 1.0
    assert c.max_distance == 100.0
    assert c.blend_rate == 2.0
    assert c.focus_speed == 3.0
    assert c.focus_distance == 3.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_distance": 0.0},
        {"min_distance": -1.0},
        {"min_distance": 10.0, "max_distance": 5.0},
        {"min_fov": 0.0},
        {"min_fov": 90.0, "max_fov": 60.0},
        {"max_fov": 180.0},
        {"min_ortho_size": 0.0},
        {"blend_rate": 0.0},
        {"focus_speed": -3.0},
    ],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        RigConfig(**kwargs)


def test_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        RigConfig(min_distance=0.0)


def test_load_config_reads_json(tmp_path) -> None:
    path = tmp_path / "rig.json"
    path.write_text(json.dumps({"zoom_speed": 4.0, "max_distance": 50.0}))
    c = load_config(path)
    assert c.zoom_speed == 4.0
    assert c.max_distance == 50.0
    assert c.min_distance == 1.0


def test_load_config_rejects_unknown_keys(tmp_path) -> None:
    path = tmp_path / "rig.json"
    path.write_text(json.dumps({"zoom_sped": 4.0}))
    with pytest.raises(ConfigError, match="zoom_sped"):
        load_config(path)


def test_load_config_rejects_bad_json(tmp_path) -> None:
    path = tmp_path / "rig.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(path)

    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_reads_utf8(tmp_path) -> None:
    path = tmp_path / "rig.json"
    path.write_text(json.dumps({"zoom_speed": 4.0, "größe": 1.0}, ensure_ascii=False), encoding="utf-8")
    with pytest.raises(ConfigError, match="größe"):
        load_config(path)
