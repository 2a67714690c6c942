"""Vibe tally tests."""

from tripconsensus.domain.aggregation.vibes import tally_vibes


def test_most_frequent_first_and_capped_at_three():
    choices = [
        ["beach", "food"],
        ["culture", "beach", "nightlife"],
        ["food", "beach"],
        ["adventure"],
    ]
    assert tally_vibes(choices) == ["beach", "food", "culture"]


def test_ties_keep_first_appearance_order():
    assert tally_vibes([["relax", "culture"], ["culture", "relax"]]) == ["relax", "culture"]
    assert tally_vibes([["culture", "relax"], ["relax", "culture"]]) == ["culture", "relax"]


def test_fewer_than_three_and_empty():
    assert tally_vibes([["beach"], []]) == ["beach"]
    assert tally_vibes([]) == []
    assert tally_vibes([["beach"]], limit=0) == []


def test_custom_limit():
    assert tally_vibes([["a", "b", "c", "d"], ["d"]], limit=2) == ["d", "a"]
