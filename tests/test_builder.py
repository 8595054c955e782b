import numpy as np
import pytest

from pairing_core.builder import build_round, deal_round_robin
from pairing_core.errors import ConfigurationError


def test_four_anchors_eight_others_gives_teams_of_three():
    anchors = ["c1", "c2", "c3", "c4"]
    others = [f"p{i}" for i in range(1, 9)]
    rnd = build_round(anchors, others, rng=np.random.default_rng(1))
    assert len(rnd.teams) == 4
    assert all(len(t.member_ids) == 3 for t in rnd.teams)
    assert sorted(rnd.participant_ids()) == sorted(anchors + others)


def test_single_anchor_no_others():
    rnd = build_round(["solo"], [], rng=np.random.default_rng(0))
    assert len(rnd.teams) == 1
    assert rnd.teams[0].member_ids == ["solo"]
    assert rnd.teams[0].anchor_id == "solo"


def test_no_anchors_raises_before_drawing():
    rng = np.random.default_rng(7)
    with pytest.raises(ConfigurationError):
        build_round([], ["p1", "p2"], rng=rng)
    assert rng.random() == np.random.default_rng(7).random()


def test_sizes_balanced_and_anchor_first():
    anchors = [1, 2, 3]
    others = list(range(10, 21))  # 11 others
    for seed in range(20):
        rnd = build_round(anchors, others, rng=np.random.default_rng(seed))
        sizes = [len(t.member_ids) for t in rnd.teams]
        assert max(sizes) - min(sizes) <= 1
        for team, anchor in zip(rnd.teams, anchors):
            assert team.anchor_id == anchor
            assert team.member_ids[0] == anchor
        assert sorted(rnd.participant_ids()) == sorted(anchors + others)


def test_more_anchors_than_others_leaves_singletons():
    rnd = build_round(["a", "b", "c", "d"], ["x"], rng=np.random.default_rng(3))
    sizes = sorted(len(t.member_ids) for t in rnd.teams)
    assert sizes == [1, 1, 1, 2]


def test_input_list_not_mutated():
    others = ["p1", "p2", "p3", "p4"]
    build_round(["c1", "c2"], others, rng=np.random.default_rng(5))
    assert others == ["p1", "p2", "p3", "p4"]


def test_deal_round_robin_order():
    groups = deal_round_robin(["a", "b"], ["x", "y", "z"])
    assert groups == [["a", "x", "z"], ["b", "y"]]


def test_duplicate_anchors_rejected():
    with pytest.raises(ConfigurationError):
        build_round(["a", "a"], ["x"], rng=np.random.default_rng(0))


def test_others_overlapping_anchor_rejected_before_drawing():
    rng = np.random.default_rng(9)
    with pytest.raises(ConfigurationError):
        build_round(["c1", "c2"], ["c1", "p1", "p2"], rng=rng)
    assert rng.random() == np.random.default_rng(9).random()


def test_repeated_other_rejected_before_drawing():
    rng = np.random.default_rng(9)
    with pytest.raises(ConfigurationError):
        build_round(["c1", "c2"], ["p1", "p2", "p1"], rng=rng)
    assert rng.random() == np.random.default_rng(9).random()
