import pytest
from pydantic import ValidationError

from pairing_core.config import (
    DEFAULT_CONFIG, EngineConfig, ReshuffleOptions, ScheduleOptions,
    load_config_yaml, parse_config_yaml, make_rng,
)


def test_defaults_match_config_dict():
    cfg = EngineConfig()
    assert cfg.reshuffle.max_iterations == DEFAULT_CONFIG["reshuffle"]["max_iterations"] == 100
    assert cfg.schedule.max_iterations == 10000
    assert cfg.schedule.initial_temperature == 100.0
    assert cfg.schedule.cooling_rate == 0.95
    assert cfg.schedule.slots_per_round == 12


@pytest.mark.parametrize("rate", [0.0, 1.0, 1.5, -0.1])
def test_cooling_rate_must_be_inside_unit_interval(rate):
    with pytest.raises(ValidationError):
        ScheduleOptions(cooling_rate=rate)


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        ReshuffleOptions(max_iterations=-1)
    with pytest.raises(ValueError):
        ScheduleOptions(initial_temperature=0)


def test_parse_yaml_sections():
    cfg = parse_config_yaml(
        "schedule:\n  max_iterations: 250\n  cooling_rate: 0.9\n  random_seed: 3\n"
        "reshuffle:\n  max_iterations: 7\n"
    )
    assert cfg.schedule.max_iterations == 250
    assert cfg.schedule.cooling_rate == 0.9
    assert cfg.schedule.random_seed == 3
    assert cfg.reshuffle.max_iterations == 7
    assert parse_config_yaml("") == EngineConfig()


def test_parse_yaml_rejects_bad_sections():
    with pytest.raises(ValueError):
        parse_config_yaml("- a\n- b\n")
    with pytest.raises(ValueError):
        parse_config_yaml("schedule: 5\n")


def test_load_yaml_file(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("schedule:\n  slots_per_round: 8\n", encoding="utf-8")
    assert load_config_yaml(str(path)).schedule.slots_per_round == 8


def test_make_rng_seeded():
    assert make_rng(4).random() == make_rng(4).random()
