import json

import pytest

from arcade_pong.config import (
    BUILT_IN_PROFILES, DEFAULT_CONFIG, load_profile, make_config, validate_config,
)


def test_load_profile_defaults_to_classic():
    assert load_profile(None) == BUILT_IN_PROFILES["classic"]


def test_load_profile_built_in_key():
    assert load_profile("headless")["render_mode"] == "none"


def test_load_profile_from_json(tmp_path):
    p = tmp_path / "slow.json"
    p.write_text(json.dumps({"fps": 30, "seed": 5}))
    assert load_profile(str(p)) == {"fps": 30, "seed": 5}


def test_load_profile_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_profile(str(tmp_path / "nope.json"))


def test_load_profile_rejects_non_object(tmp_path):
    p = tmp_path / "list.json"
    p.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        load_profile(str(p))


def test_make_config_layers_and_ignores_none():
    cfg = make_config({"fps": 30, "audio": False}, fps=None, seed=9)
    assert cfg["fps"] == 30
    assert cfg["audio"] is False
    assert cfg["seed"] == 9
    assert cfg["render_mode"] == DEFAULT_CONFIG["render_mode"]


def test_make_config_does_not_mutate_defaults():
    make_config({"fps": 1})
    assert DEFAULT_CONFIG["fps"] == 60


def test_validate_config_accepts_defaults():
    cfg = make_config()
    assert validate_config(cfg) is cfg


@pytest.mark.parametrize("override", [{"fps": 0}, {"fps": -5}, {"seed": -1}, {"max_frames": -1}])
def test_validate_config_rejects_bad_values(override):
    with pytest.raises(ValueError):
        validate_config(make_config(override))
