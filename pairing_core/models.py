# pairing_core/models.py
from __future__ import annotations
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, model_validator

Participant = Union[int, str]


class Team(BaseModel):
    id: str
    label: str
    anchor_id: Participant
    member_ids: List[Participant] = Field(default_factory=list)  # anchor first when built
    color: Optional[str] = None

    @model_validator(mode="after")
    def _anchor_and_unique(self):
        if self.anchor_id not in self.member_ids:
            raise ValueError(f"team {self.id}: anchor {self.anchor_id!r} missing from members")
        if len(set(self.member_ids)) != len(self.member_ids):
            raise ValueError(f"team {self.id}: duplicate members")
        return self

    def non_anchor_ids(self) -> List[Participant]:
        return [m for m in self.member_ids if m != self.anchor_id]


class Round(BaseModel):
    id: str
    index: int = 1
    teams: List[Team] = Field(default_factory=list)
    slot_count: int = 0
    slots: Dict[str, List[bool]] = Field(default_factory=dict)  # team_id -> per-slot flags

    def participant_ids(self) -> List[Participant]:
        return [m for t in self.teams for m in t.member_ids]

    def anchor_ids(self) -> List[Participant]:
        return [t.anchor_id for t in self.teams]

    def team_by_id(self, team_id: str) -> Optional[Team]:
        for t in self.teams:
            if t.id == team_id:
                return t
        return None

    def team_of(self, participant: Participant) -> Optional[Team]:
        for t in self.teams:
            if participant in t.member_ids:
                return t
        return None


class CaptainProfile(BaseModel):
    team_name: str = ""
    team_color: Optional[str] = None


class AnnealStep(BaseModel):
    iteration: int
    temperature: float
    current_cost: int
    best_cost: int
    accepted: bool = False
    skipped: bool = False  # proposal had no swappable pair
