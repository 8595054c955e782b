# pairing_core/constants.py
from __future__ import annotations

# --- Local search ---
DEFAULT_RESHUFFLE_ITERATIONS = 100

# --- Annealing ---
DEFAULT_SCHEDULE_ITERATIONS = 10000
DEFAULT_INITIAL_TEMPERATURE = 100.0
DEFAULT_COOLING_RATE = 0.95
PROGRESS_LOG_EVERY = 1000

# --- Round metadata ---
DEFAULT_SLOTS_PER_ROUND = 12
MAX_GAME_ROUNDS = 50

# --- Display ---
DEFAULT_TEAM_COLOR = "#3b82f6"


def round_id_for(index: int) -> str:
    return f"round-{index}"


def team_id_for(round_id: str, position: int) -> str:
    """Team ids are derived from the round id and 1-based team position."""
    return f"{round_id}-team-{position}"


def team_label_for(position: int) -> str:
    return f"Team {position}"
