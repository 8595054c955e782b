# pairing_core/reshuffle.py
from __future__ import annotations
from typing import List, Optional, Sequence, Set
import logging

from .config import ReshuffleOptions
from .cost import PairTally, group_linear_cost, linear_cost
from .models import Participant, Round, Team

logger = logging.getLogger("pairing_core.reshuffle")


def _swappable_positions(team: Team, movable: Optional[Set[Participant]]) -> List[int]:
    return [
        idx for idx, pid in enumerate(team.member_ids)
        if pid != team.anchor_id and (movable is None or pid in movable)
    ]


def _first_improving_swap(teams: List[Team], tally: PairTally, movable: Optional[Set[Participant]]) -> bool:
    """
    Scan team pairs (i < j), then member pairs, in order. Apply the first swap
    that lowers the round's linear cost and report whether one was found.

    Only the two touched teams change, so comparing their cost before and
    after is the same test as comparing the whole round.
    """
    for i in range(len(teams)):
        for j in range(i + 1, len(teams)):
            m1 = teams[i].member_ids
            m2 = teams[j].member_ids
            for a in _swappable_positions(teams[i], movable):
                for b in _swappable_positions(teams[j], movable):
                    before = group_linear_cost(m1, tally) + group_linear_cost(m2, tally)
                    m1[a], m2[b] = m2[b], m1[a]
                    after = group_linear_cost(m1, tally) + group_linear_cost(m2, tally)
                    if after < before:
                        return True
                    m1[a], m2[b] = m2[b], m1[a]
    return False


def reshuffle(
    rnd: Round,
    others: Optional[Sequence[Participant]],
    historical_tally: PairTally,
    options: Optional[ReshuffleOptions] = None,
) -> Round:
    """
    Greedy first-improvement descent over non-anchor swaps within one round.

    historical_tally must be built from other rounds only. Anchors never move.

    `others` narrows the movable set: when given, a non-anchor member missing
    from it stays on its team (e.g. a late arrival placed by hand). Pass None
    to let every non-anchor member be swapped. Returns a new Round; the input
    is not modified.
    """
    options = options or ReshuffleOptions()
    movable = set(others) if others is not None else None
    working = rnd.model_copy(deep=True)

    passes = 0
    improved = True
    while improved and passes < options.max_iterations:
        passes += 1
        improved = _first_improving_swap(working.teams, historical_tally, movable)

    logger.debug("Reshuffle completed in %d passes. Cost: %d", passes, linear_cost(working, historical_tally))
    return working
