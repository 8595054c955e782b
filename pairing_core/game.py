# pairing_core/game.py
from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
import numpy as np

from .builder import build_round, require_anchors, with_slots
from .config import ReshuffleOptions, ScheduleOptions
from .constants import DEFAULT_SLOTS_PER_ROUND, DEFAULT_TEAM_COLOR, MAX_GAME_ROUNDS, round_id_for
from .cost import PairTally, compute_tally
from .errors import AssignmentError, ConfigurationError
from .models import CaptainProfile, Participant, Round
from .reshuffle import reshuffle
from .scheduler import schedule_game


def history_tally(rounds: Iterable[Round], exclude_round_id: Optional[str] = None) -> PairTally:
    return compute_tally(r for r in rounds if r.id != exclude_round_id)


def reshuffle_round(
    history: Sequence[Round],
    rnd: Round,
    others: Optional[Sequence[Participant]] = None,
    options: Optional[ReshuffleOptions] = None,
) -> Round:
    """Reshuffle `rnd` against every other round in `history`."""
    tally = history_tally(history, exclude_round_id=rnd.id)
    return reshuffle(rnd, others, tally, options)


def apply_captain_profiles(rounds: Sequence[Round], profiles: Mapping[Participant, CaptainProfile]) -> List[Round]:
    out = []
    for rnd in rounds:
        rnd = rnd.model_copy(deep=True)
        for team in rnd.teams:
            prof = profiles.get(team.anchor_id)
            if prof is None:
                continue
            if prof.team_name:
                team.label = prof.team_name
            team.color = prof.team_color or DEFAULT_TEAM_COLOR
        out.append(rnd)
    return out


def move_participant(rnd: Round, participant_id: Participant, from_team_id: str, to_team_id: str) -> Round:
    """Manual move of one non-anchor participant; returns a new Round."""
    src = rnd.team_by_id(from_team_id)
    dst = rnd.team_by_id(to_team_id)
    if src is None or dst is None:
        raise AssignmentError(f"Team not found: {from_team_id if src is None else to_team_id}")
    if participant_id not in src.member_ids:
        raise AssignmentError(f"{participant_id!r} is not on team {from_team_id}")
    if participant_id == src.anchor_id:
        raise AssignmentError("Cannot move an anchor off their team")

    out = rnd.model_copy(deep=True)
    if from_team_id == to_team_id:
        return out
    new_src = out.team_by_id(from_team_id)
    new_dst = out.team_by_id(to_team_id)
    new_src.member_ids = [m for m in new_src.member_ids if m != participant_id]
    new_dst.member_ids.append(participant_id)
    return out


def validate_round(rnd: Round, anchor_ids: Sequence[Participant], others: Sequence[Participant]) -> List[str]:
    errs: List[str] = []

    team_anchors = rnd.anchor_ids()
    if Counter(team_anchors) != Counter(anchor_ids):
        errs.append(f"Team anchors {team_anchors} do not match expected anchors {list(anchor_ids)}")

    for team in rnd.teams:
        if team.anchor_id not in team.member_ids:
            errs.append(f"{team.id}: anchor {team.anchor_id!r} is not a member")

    seen = Counter(rnd.participant_ids())
    dupes = [pid for pid, n in seen.items() if n > 1]
    if dupes:
        errs.append(f"Participants on more than one team: {dupes}")

    expected = set(anchor_ids) | set(others)
    missing = [pid for pid in expected if pid not in seen]
    extra = [pid for pid in seen if pid not in expected]
    if missing:
        errs.append(f"Participants missing from round: {missing}")
    if extra:
        errs.append(f"Unknown participants in round: {extra}")
    return errs


def start_game(
    num_rounds: int,
    anchor_ids: Sequence[Participant],
    others: Sequence[Participant],
    profiles: Optional[Dict[Participant, CaptainProfile]] = None,
    options: Optional[ScheduleOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Round]:
    require_anchors(anchor_ids)
    if num_rounds < 1 or num_rounds > MAX_GAME_ROUNDS:
        raise ConfigurationError(f"invalid round count: {num_rounds} (must be between 1 and {MAX_GAME_ROUNDS})")
    rounds = schedule_game(num_rounds, anchor_ids, others, options, rng)
    return apply_captain_profiles(rounds, profiles or {})


def new_round(
    history: Sequence[Round],
    anchor_ids: Sequence[Participant],
    others: Sequence[Participant],
    profiles: Optional[Dict[Participant, CaptainProfile]] = None,
    slots_per_round: int = DEFAULT_SLOTS_PER_ROUND,
    rng: Optional[np.random.Generator] = None,
) -> Round:
    """Build the next single round after `history`, with slot grid and captain profiles."""
    index = len(history) + 1
    taken = {r.id for r in history}
    round_id = round_id_for(index)
    n = 1
    while round_id in taken:
        round_id = f"{round_id_for(index)}-{n}"
        n += 1
    rnd = with_slots(build_round(anchor_ids, others, rng=rng, index=index, round_id=round_id), slots_per_round)
    return apply_captain_profiles([rnd], profiles or {})[0]
