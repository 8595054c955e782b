"""
pairing_core package: team building, pairing costs, greedy reshuffle and
multi-round annealing for captain-anchored trivia teams.
"""
from .errors import PairingError, ConfigurationError, AssignmentError
from .models import Participant, Team, Round, CaptainProfile, AnnealStep
from .config import (
    DEFAULT_CONFIG, ReshuffleOptions, ScheduleOptions, EngineConfig,
    load_config_yaml, parse_config_yaml, make_rng,
)
from .builder import build_round
from .cost import compute_tally, linear_cost, convex_cost, pair_key
from .reshuffle import reshuffle
from .scheduler import ScheduleRun, prepare_schedule, schedule_game
