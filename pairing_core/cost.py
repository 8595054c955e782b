# pairing_core/cost.py
"""
Pairing tallies and the two cost functions over them.

A tally maps an unordered participant pair (a frozenset of two ids) to the
number of rounds in which both shared a team. Tallies are Counters, so a
pair that never met reads back as 0.

- linear cost: sum of tally values over a round's co-member pairs. Used by
  single-round greedy search.
- convex cost: sum of (count - 1)^2 over pairs that met more than once.
  Used as the annealing energy across a whole schedule.
"""
from __future__ import annotations
from collections import Counter
from itertools import combinations
from typing import FrozenSet, Iterable, Sequence

from .models import Participant, Round

PairKey = FrozenSet[Participant]
PairTally = Counter  # Counter[PairKey]


def pair_key(a: Participant, b: Participant) -> PairKey:
    return frozenset((a, b))


def iter_groups(rounds: Iterable[Round]) -> Iterable[Sequence[Participant]]:
    for rnd in rounds:
        for team in rnd.teams:
            yield team.member_ids


def tally_groups(groups: Iterable[Sequence[Participant]]) -> PairTally:
    tally: PairTally = Counter()
    for members in groups:
        for a, b in combinations(members, 2):
            tally[pair_key(a, b)] += 1
    return tally


def compute_tally(rounds: Iterable[Round]) -> PairTally:
    return tally_groups(iter_groups(rounds))


def group_linear_cost(members: Sequence[Participant], tally: PairTally) -> int:
    return sum(tally.get(pair_key(a, b), 0) for a, b in combinations(members, 2))


def linear_cost(rnd: Round, tally: PairTally) -> int:
    return sum(group_linear_cost(t.member_ids, tally) for t in rnd.teams)


def convex_penalty(tally: PairTally) -> int:
    return sum((n - 1) * (n - 1) for n in tally.values() if n > 1)


def convex_cost_groups(groups: Iterable[Sequence[Participant]]) -> int:
    return convex_penalty(tally_groups(groups))


def convex_cost(rounds: Iterable[Round]) -> int:
    return convex_penalty(compute_tally(rounds))
