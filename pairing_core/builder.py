# pairing_core/builder.py
from __future__ import annotations
from typing import List, Optional, Sequence
import logging
import numpy as np

from .constants import round_id_for, team_id_for, team_label_for
from .errors import ConfigurationError
from .models import Participant, Round, Team

logger = logging.getLogger("pairing_core.builder")


def require_anchors(anchor_ids: Sequence[Participant]) -> List[Participant]:
    anchors = list(anchor_ids or [])
    if not anchors:
        raise ConfigurationError("no anchors supplied: at least one team anchor is required")
    if len(set(anchors)) != len(anchors):
        raise ConfigurationError("anchor ids must be unique")
    return anchors


def require_participants(anchors: Sequence[Participant], others: Sequence[Participant]) -> List[Participant]:
    """Others must be unique and disjoint from the anchors."""
    others = list(others or [])
    seen = set(anchors)
    for pid in others:
        if pid in seen:
            raise ConfigurationError(f"participant {pid!r} listed more than once")
        seen.add(pid)
    return others


def shuffled(items: Sequence[Participant], rng: np.random.Generator) -> List[Participant]:
    """Uniform permutation of items; the input sequence is left untouched."""
    items = list(items)
    return [items[i] for i in rng.permutation(len(items))]


def deal_round_robin(
    anchors: Sequence[Participant], ordered_others: Sequence[Participant]
) -> List[List[Participant]]:
    """
    Seed one group per anchor, then deal others in order: position i goes to
    group i mod len(anchors). Group sizes differ by at most one.
    """
    groups = [[a] for a in anchors]
    for i, pid in enumerate(ordered_others):
        groups[i % len(groups)].append(pid)
    return groups


def round_from_groups(
    groups: Sequence[Sequence[Participant]],
    index: int = 1,
    round_id: Optional[str] = None,
) -> Round:
    """Wrap anchor-first member lists as a Round."""
    rid = round_id or round_id_for(index)
    teams = [
        Team(
            id=team_id_for(rid, pos),
            label=team_label_for(pos),
            anchor_id=members[0],
            member_ids=list(members),
        )
        for pos, members in enumerate(groups, start=1)
    ]
    return Round(id=rid, index=index, teams=teams)


def with_slots(rnd: Round, slot_count: int) -> Round:
    """Attach an all-False per-team slot grid of length slot_count."""
    rnd.slot_count = slot_count
    rnd.slots = {t.id: [False] * slot_count for t in rnd.teams}
    return rnd


def build_round(
    anchor_ids: Sequence[Participant],
    others: Sequence[Participant],
    rng: Optional[np.random.Generator] = None,
    index: int = 1,
    round_id: Optional[str] = None,
) -> Round:
    anchors = require_anchors(anchor_ids)
    others = require_participants(anchors, others)
    rng = rng if rng is not None else np.random.default_rng()

    groups = deal_round_robin(anchors, shuffled(others, rng))
    rnd = round_from_groups(groups, index=index, round_id=round_id)
    logger.debug("Built %s: %d teams, sizes %s", rnd.id, len(groups), [len(g) for g in groups])
    return rnd
