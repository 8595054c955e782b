# pairing_core/config.py
from __future__ import annotations
from typing import Optional
import numpy as np
import yaml
from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_RESHUFFLE_ITERATIONS, DEFAULT_SCHEDULE_ITERATIONS,
    DEFAULT_INITIAL_TEMPERATURE, DEFAULT_COOLING_RATE,
    DEFAULT_SLOTS_PER_ROUND, PROGRESS_LOG_EVERY,
)

# ===== Engine defaults =====
DEFAULT_CONFIG = {
    "reshuffle": {
        "max_iterations": DEFAULT_RESHUFFLE_ITERATIONS,
    },
    "schedule": {
        "max_iterations": DEFAULT_SCHEDULE_ITERATIONS,
        "initial_temperature": DEFAULT_INITIAL_TEMPERATURE,
        "cooling_rate": DEFAULT_COOLING_RATE,
        "slots_per_round": DEFAULT_SLOTS_PER_ROUND,
        "random_seed": None,
        "log_every": PROGRESS_LOG_EVERY,
    },
}


class ReshuffleOptions(BaseModel):
    max_iterations: int = Field(default=DEFAULT_RESHUFFLE_ITERATIONS, ge=0)


class ScheduleOptions(BaseModel):
    max_iterations: int = Field(default=DEFAULT_SCHEDULE_ITERATIONS, ge=0)
    initial_temperature: float = Field(default=DEFAULT_INITIAL_TEMPERATURE, gt=0)
    cooling_rate: float = DEFAULT_COOLING_RATE
    slots_per_round: int = Field(default=DEFAULT_SLOTS_PER_ROUND, ge=0)
    random_seed: Optional[int] = None
    log_every: int = Field(default=PROGRESS_LOG_EVERY, ge=1)

    @field_validator("cooling_rate")
    @classmethod
    def _open_unit_interval(cls, v):
        if not 0 < v < 1:
            raise ValueError("cooling_rate must be strictly between 0 and 1")
        return v


class EngineConfig(BaseModel):
    reshuffle: ReshuffleOptions = Field(default_factory=ReshuffleOptions)
    schedule: ScheduleOptions = Field(default_factory=ScheduleOptions)


def parse_config_yaml(text: str) -> EngineConfig:
    obj = yaml.safe_load(text) or {}
    if not isinstance(obj, dict):
        raise ValueError("Engine config must be a mapping.")
    for section in ("reshuffle", "schedule"):
        if section in obj and not isinstance(obj[section] or {}, dict):
            raise ValueError(f"Config section '{section}' must be a mapping.")
    return EngineConfig(
        reshuffle=ReshuffleOptions(**(obj.get("reshuffle") or {})),
        schedule=ScheduleOptions(**(obj.get("schedule") or {})),
    )


def load_config_yaml(path: str) -> EngineConfig:
    with open(path, "r", encoding="utf-8") as f:
        return parse_config_yaml(f.read())


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)
