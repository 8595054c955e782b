# pairing_core/scheduler.py
"""
Multi-round scheduling by simulated annealing.

The working schedule is an arena of plain lists, round -> team -> member ids,
with each team's anchor at position 0. Mutations only ever touch positions
1.., so anchors stay put. The best schedule is a structural clone of the
arena taken whenever an accepted state beats the best cost so far.

Two ways to run it:
- schedule_game(): one blocking call, returns the best rounds.
- prepare_schedule() then iterate ScheduleRun.steps() (stop early if you
  like) and call best_rounds().
"""
from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple
import logging
import math
import numpy as np

from .builder import (
    deal_round_robin, require_anchors, require_participants, round_from_groups, shuffled, with_slots,
)
from .config import ScheduleOptions, make_rng
from .cost import convex_cost_groups
from .errors import ConfigurationError, PairingError
from .models import AnnealStep, Participant, Round

logger = logging.getLogger("pairing_core.scheduler")

Group = List[Participant]
Arena = List[List[Group]]
Move = Tuple[Group, int, Group, int]


def acceptance_probability(delta: int, temperature: float) -> float:
    """Metropolis rule: always take improvements, else exp(-delta / T)."""
    if delta < 0:
        return 1.0
    if temperature <= 0:
        return 0.0
    return math.exp(-delta / temperature)


def clone_arena(arena: Arena) -> Arena:
    return [[list(g) for g in groups] for groups in arena]


class ScheduleRun:
    """One annealing run over an exclusively owned working arena."""

    def __init__(self, arena: Arena, options: ScheduleOptions, rng: np.random.Generator):
        self.arena = arena
        self.options = options
        self.rng = rng
        self.iteration = 0
        self.temperature = float(options.initial_temperature)
        self.current_cost = self._energy()
        self.best_arena = clone_arena(arena)
        self.best_cost = self.current_cost
        self.best_history: List[int] = [self.best_cost]
        self.improvements = 0

    def _groups(self):
        for groups in self.arena:
            yield from groups

    def _energy(self) -> int:
        return convex_cost_groups(self._groups())

    def _propose(self) -> Optional[Move]:
        groups = self.arena[int(self.rng.integers(len(self.arena)))]
        if len(groups) < 2:
            return None
        t1 = int(self.rng.integers(len(groups)))
        t2 = int(self.rng.integers(len(groups) - 1))
        if t2 >= t1:
            t2 += 1
        g1, g2 = groups[t1], groups[t2]
        if len(g1) < 2 or len(g2) < 2:
            return None
        a = 1 + int(self.rng.integers(len(g1) - 1))
        b = 1 + int(self.rng.integers(len(g2) - 1))
        return g1, a, g2, b

    @property
    def done(self) -> bool:
        return self.iteration >= self.options.max_iterations

    def step(self) -> AnnealStep:
        """
        Run one iteration. A proposal with no swappable member uses up the
        iteration but is neither evaluated nor cooled. Raises PairingError once
        the iteration budget is spent.
        """
        if self.done:
            raise PairingError(f"annealing run finished after {self.iteration} iterations")
        self.iteration += 1
        move = self._propose()
        if move is None:
            return self._record(accepted=False, skipped=True)

        g1, a, g2, b = move
        g1[a], g2[b] = g2[b], g1[a]
        new_cost = self._energy()
        delta = new_cost - self.current_cost

        accepted = delta < 0 or self.rng.random() < acceptance_probability(delta, self.temperature)
        if accepted:
            self.current_cost = new_cost
            if new_cost < self.best_cost:
                self.best_cost = new_cost
                self.best_arena = clone_arena(self.arena)
                self.improvements += 1
        else:
            g1[a], g2[b] = g2[b], g1[a]

        self.temperature *= self.options.cooling_rate
        return self._record(accepted=accepted, skipped=False)

    def _record(self, accepted: bool, skipped: bool) -> AnnealStep:
        self.best_history.append(self.best_cost)
        if self.iteration % self.options.log_every == 0:
            logger.debug(
                "Iteration %d: best energy = %d, temperature = %.2f",
                self.iteration, self.best_cost, self.temperature,
            )
        return AnnealStep(
            iteration=self.iteration,
            temperature=self.temperature,
            current_cost=self.current_cost,
            best_cost=self.best_cost,
            accepted=accepted,
            skipped=skipped,
        )

    def steps(self) -> Iterator[AnnealStep]:
        while not self.done:
            yield self.step()

    def best_rounds(self) -> List[Round]:
        rounds = []
        for index, groups in enumerate(clone_arena(self.best_arena), start=1):
            rnd = round_from_groups(groups, index=index)
            rounds.append(with_slots(rnd, self.options.slots_per_round))
        return rounds


def prepare_schedule(
    num_rounds: int,
    anchor_ids: Sequence[Participant],
    others: Sequence[Participant],
    options: Optional[ScheduleOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> ScheduleRun:
    """Validate inputs and build the initial random schedule."""
    anchors = require_anchors(anchor_ids)
    others = require_participants(anchors, others)
    if num_rounds < 1:
        raise ConfigurationError(f"invalid round count: {num_rounds} (must be at least 1)")
    options = options or ScheduleOptions()
    rng = rng if rng is not None else make_rng(options.random_seed)

    arena = [deal_round_robin(anchors, shuffled(others, rng)) for _ in range(num_rounds)]
    return ScheduleRun(arena, options, rng)


def schedule_game(
    num_rounds: int,
    anchor_ids: Sequence[Participant],
    others: Sequence[Participant],
    options: Optional[ScheduleOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Round]:
    run = prepare_schedule(num_rounds, anchor_ids, others, options, rng)
    logger.info(
        "Generating %d rounds with simulated annealing (%d iterations)...",
        num_rounds, run.options.max_iterations,
    )
    for _ in run.steps():
        pass
    logger.info("Annealing complete. Best energy: %d, improvements: %d", run.best_cost, run.improvements)
    return run.best_rounds()
