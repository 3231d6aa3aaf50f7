import pytest

from dicecard.ai import (
    AIPlayer,
    FaceValueStrategy,
    OfAKindValueStrategy,
    StraightStrategy,
    face_value_strategy,
    strategy_for_scorable,
)
from dicecard.scorecard import ScorableName, Scorecard, scoreable_by_name
from dicecard.scoring import Chance, Sixes, Yahtzee


def _card_with_only_chance_open():
    entries = {
        name: 0
        for name in ScorableName
        if scoreable_by_name(name) is not None and name is not ScorableName.CHANCE
    }
    entries[ScorableName.YAHTZEE_BONUS] = 0
    return Scorecard(entries=entries)


def test_face_value_strategy_keeps_matching_dice():
    assert FaceValueStrategy(3).pick_keepers((1, 3, 3, 4, 6)) == (False, True, True, False, False)


def test_face_value_strategy_default_keeps_nothing():
    assert FaceValueStrategy().pick_keepers((1, 2, 3, 4, 5)) == (False,) * 5


def test_of_a_kind_keeps_most_frequent():
    assert OfAKindValueStrategy().pick_keepers((2, 2, 2, 5, 6)) == (True, True, True, False, False)


def test_of_a_kind_tie_goes_to_last_value_seen():
    assert OfAKindValueStrategy().pick_keepers((2, 2, 5, 5, 6)) == (False, False, True, True, False)


def test_straight_strategy_keeps_distinct_values():
    assert StraightStrategy().pick_keepers((1, 2, 2, 3, 4)) == (True, True, False, True, True)


@pytest.mark.parametrize(
    "name, number",
    [(ScorableName.ONES, 1), (ScorableName.FOURS, 4), (ScorableName.SIXES, 6), (ScorableName.CHANCE, 0)],
)
def test_face_value_strategy_for_name(name, number):
    assert face_value_strategy(name) == FaceValueStrategy(number)


@pytest.mark.parametrize(
    "name, expected",
    [
        (ScorableName.TWOS, FaceValueStrategy(2)),
        (ScorableName.FULL_HOUSE, FaceValueStrategy(0)),
        (ScorableName.SMALL_STRAIGHT, StraightStrategy()),
        (ScorableName.LARGE_STRAIGHT, StraightStrategy()),
        (ScorableName.YAHTZEE, OfAKindValueStrategy()),
        (ScorableName.CHANCE, OfAKindValueStrategy()),
        (ScorableName.SUBTOTAL, None),
    ],
)
def test_strategy_for_scorable(name, expected):
    assert strategy_for_scorable(name) == expected


def test_pick_scorable_prefers_yahtzee_on_fresh_card():
    assert AIPlayer().pick_scorable((6, 6, 6, 6, 6)) == Yahtzee()


def test_pick_scorable_skips_scored_rows():
    card = Scorecard()
    card.entries[ScorableName.YAHTZEE] = 0
    player = AIPlayer(scorecard=card)
    assert player.pick_scorable((6, 6, 6, 6, 6)) == Sixes()


def test_pick_scorable_falls_back_to_chance():
    player = AIPlayer(scorecard=_card_with_only_chance_open())
    assert player.pick_scorable((1, 2, 3, 4, 6)) == Chance()


def test_pick_scorable_chooses_an_open_row():
    card = Scorecard()
    card.entries[ScorableName.ONES] = 1
    choice = AIPlayer(scorecard=card).pick_scorable((1, 1, 2, 3, 5))
    assert choice != scoreable_by_name(ScorableName.ONES)
    assert choice != Chance()


def test_assess_roll_keeps_completed_yahtzee():
    decision = AIPlayer().assess_roll((5, 5, 5, 5, 5), 2)
    assert decision.will_keep_all()


def test_assess_roll_with_only_chance_open_keeps_most_frequent():
    player = AIPlayer(scorecard=_card_with_only_chance_open())
    assert player.assess_roll((2, 2, 3, 5, 6), 1) == (True, True, False, False, False)


def test_assess_roll_returns_a_flag_per_die():
    decision = AIPlayer().assess_roll((1, 3, 4, 4, 6), 2)
    assert len(decision) == 5
    assert all(isinstance(flag, bool) for flag in decision)