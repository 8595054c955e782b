"""
Internal helpers for tests (not imported by the engine).
"""
from __future__ import annotations
from typing import List, Sequence

from .builder import round_from_groups
from .models import Participant, Round


def quick_round(groups: Sequence[Sequence[Participant]], index: int = 1, round_id: str = "") -> Round:
    """Each inner list is one team, anchor first."""
    return round_from_groups([list(g) for g in groups], index=index, round_id=round_id or None)


def quick_rounds(*schedules: Sequence[Sequence[Participant]]) -> List[Round]:
    return [quick_round(groups, index=i) for i, groups in enumerate(schedules, start=1)]
