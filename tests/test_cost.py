from pairing_core.cost import compute_tally, convex_cost, linear_cost, pair_key
from pairing_core.engine_test_helpers import quick_round, quick_rounds


def test_tally_counts_shared_rounds():
    rounds = quick_rounds(
        [["A", "B", "x"], ["C", "y"]],
        [["A", "B"], ["C", "x", "y"]],
        [["A", "B", "y"], ["C", "x"]],
        [["A", "x"], ["C", "B", "y"]],
        [["A", "y"], ["C", "B", "x"]],
    )
    tally = compute_tally(rounds)
    assert tally[pair_key("A", "B")] == 3
    assert tally[pair_key("B", "A")] == 3
    assert tally[pair_key("A", "C")] == 0


def test_convex_contribution_of_three_meetings():
    rounds = quick_rounds(
        [["A", "B"], ["C"]],
        [["A", "B"], ["C"]],
        [["A", "B"], ["C"]],
        [["A"], ["C", "B"]],
        [["A"], ["C", "B"]],
    )
    # A-B three times -> (3-1)^2 = 4; B-C twice -> 1
    assert convex_cost(rounds) == 5


def test_convex_zero_when_no_repeats():
    rounds = quick_rounds(
        [["A", "B"], ["C", "D"]],
        [["A", "C"], ["B", "D"]],
        [["A", "D"], ["B", "C"]],
    )
    assert convex_cost(rounds) == 0
    assert convex_cost([]) == 0


def test_convex_positive_with_any_repeat():
    rounds = quick_rounds([["A", "B"]], [["A", "B"]])
    assert convex_cost(rounds) == 1


def test_linear_cost_sums_history_over_co_members():
    history = quick_rounds(
        [["A", "B", "C"], ["D"]],
        [["A", "B"], ["D", "C"]],
    )
    tally = compute_tally(history)
    rnd = quick_round([["A", "B", "C"], ["D"]])
    # A-B: 2, A-C: 1, B-C: 1
    assert linear_cost(rnd, tally) == 4
    assert linear_cost(quick_round([["A", "D"], ["B", "C"]]), tally) == 1


def test_tally_is_repeatable():
    rounds = quick_rounds([["A", "B", "C"]], [["A", "C"], ["B"]])
    assert compute_tally(rounds) == compute_tally(rounds)
