# pairing_core/report.py
from __future__ import annotations
from typing import Dict, List, Sequence
import pandas as pd

from .cost import compute_tally, convex_penalty, pair_key
from .models import Participant, Round

PAIR_COLUMNS = ["participant_a", "participant_b", "rounds_together"]


def pairing_frame(rounds: Sequence[Round]) -> pd.DataFrame:
    """One row per pair that shared a team, most frequent first."""
    rows = []
    for pair, n in compute_tally(rounds).items():
        a, b = sorted(pair, key=str)
        rows.append({"participant_a": a, "participant_b": b, "rounds_together": n})
    if not rows:
        return pd.DataFrame(columns=PAIR_COLUMNS)
    df = pd.DataFrame(rows, columns=PAIR_COLUMNS)
    df["_a"] = df["participant_a"].astype(str)
    df["_b"] = df["participant_b"].astype(str)
    df = df.sort_values(["rounds_together", "_a", "_b"], ascending=[False, True, True])
    return df.drop(columns=["_a", "_b"]).reset_index(drop=True)


def co_membership_matrix(rounds: Sequence[Round], participant_ids: Sequence[Participant]) -> pd.DataFrame:
    """Square symmetric count matrix; the diagonal is 0."""
    tally = compute_tally(rounds)
    ids = list(participant_ids)
    data = [
        [0 if a == b else tally.get(pair_key(a, b), 0) for b in ids]
        for a in ids
    ]
    return pd.DataFrame(data, index=ids, columns=ids, dtype=int)


def schedule_summary(rounds: Sequence[Round]) -> Dict:
    tally = compute_tally(rounds)
    counts: List[int] = list(tally.values())
    return {
        "rounds": len(rounds),
        "teams_per_round": [len(r.teams) for r in rounds],
        "distinct_pairs": len(counts),
        "repeated_pairs": sum(1 for n in counts if n > 1),
        "max_repeat": max(counts) if counts else 0,
        "convex_cost": convex_penalty(tally),
    }
