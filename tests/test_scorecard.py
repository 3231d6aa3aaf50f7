import pytest

from dicecard.scorecard import (
    ScorableName,
    ScorableVariety,
    Scorecard,
    scoreable_by_name,
)
from dicecard.scoring import (
    Chance,
    ErrorScore,
    Fives,
    Fours,
    FullHouse,
    Ones,
    Sixes,
    Yahtzee,
)


def test_fresh_scorecard():
    card = Scorecard()
    assert card.score_for(ScorableName.ONES) is None
    assert card.score_for(ScorableName.YAHTZEE_BONUS) == 0
    assert card.score_for(ScorableName.SUBTOTAL) == 0
    assert card.subtotal() == 0
    assert card.total() == 0
    assert not card.had_yahtzee()


def test_score_records_value():
    card = Scorecard()
    hand = (1, 1, 2, 3, 5)
    result = card.score(hand, Ones())
    assert result == Ones().score(hand, False)
    assert card.score_for(ScorableName.ONES) == result
    assert card.subtotal() == result
    assert card.total() == result


def test_error_score_is_not_recorded():
    card = Scorecard()
    before = dict(card.entries)
    assert card.score((6, 6, 6, 6, 6), ErrorScore()) == 0
    assert card.entries == before


def test_yahtzee_bonus_and_joker():
    card = Scorecard()
    assert card.score((6, 6, 6, 6, 6), Yahtzee()) == 50
    assert card.had_yahtzee()
    assert card.score_for(ScorableName.YAHTZEE_BONUS) == 0

    assert card.score((3, 3, 3, 3, 3), FullHouse()) == 25
    assert card.score_for(ScorableName.YAHTZEE_BONUS) == 100

    chance = card.score((2, 2, 2, 2, 2), Chance())
    assert card.score_for(ScorableName.YAHTZEE_BONUS) == 200
    assert card.total() == 50 + 25 + chance + 200


def test_zero_yahtzee_blocks_bonus():
    card = Scorecard()
    assert card.score((1, 2, 3, 4, 5), Yahtzee()) == 0
    assert not card.had_yahtzee()
    card.score((4, 4, 4, 4, 4), Chance())
    assert card.score_for(ScorableName.YAHTZEE_BONUS) == 0


def test_upper_bonus():
    card = Scorecard()
    card.score((6, 6, 6, 6, 6), Sixes())
    card.score((5, 5, 5, 5, 5), Fives())
    card.score((4, 4, 4, 4, 4), Fours())
    sub = card.subtotal()
    assert sub >= 63
    assert card.total() == sub + 25
    assert card.score_for(ScorableName.BONUS) == sub + 25
    assert "| Bonus                           25|" in card.render()


def test_no_upper_bonus_below_threshold():
    card = Scorecard()
    card.score((6, 6, 6, 1, 2), Sixes())
    sub = card.subtotal()
    assert card.total() == sub
    assert card.score_for(ScorableName.BONUS) == sub


def test_render_shape():
    card = Scorecard()
    card.score((1, 1, 2, 3, 5), Ones())
    lines = card.render().splitlines()
    assert len(lines) == len(ScorableName) + 4
    assert lines[0] == "-" * 37
    assert lines[-1] == "-" * 37
    assert all(len(line) == 37 for line in lines)
    assert lines[2].startswith("| Ones")
    assert lines[-2].startswith("| Total")


def test_render_with_decorator():
    card = Scorecard()
    rendered = card.render_with_decorator(lambda name: f"<{name.value}>")
    row_lines = rendered.splitlines()[2:-2]
    assert [line.split("|")[-1] for line in row_lines] == [f"<{n.value}>" for n in ScorableName]


def test_variety():
    assert ScorableName.ONES.variety() is ScorableVariety.FACE_VALUE
    assert ScorableName.YAHTZEE.variety() is ScorableVariety.OF_A_KIND
    assert ScorableName.LARGE_STRAIGHT.variety() is ScorableVariety.STRAIGHT
    assert ScorableName.FULL_HOUSE.variety() is ScorableVariety.FULL_HOUSE
    assert ScorableName.CHANCE.variety() is ScorableVariety.CHANCE
    assert ScorableName.SUBTOTAL.variety() is None


@pytest.mark.parametrize(
    "name", [ScorableName.SUBTOTAL, ScorableName.BONUS, ScorableName.YAHTZEE_BONUS]
)
def test_computed_rows_have_no_scoreable(name):
    assert scoreable_by_name(name) is None


def test_scoreable_by_name_round_trip():
    card = Scorecard()
    for name in ScorableName:
        scoreable = scoreable_by_name(name)
        if scoreable is None:
            continue
        card.score((2, 3, 4, 5, 6), scoreable)
        assert card.score_for(name) is not None
    assert scoreable_by_name(ScorableName.ONES) == Ones()
    assert card.total() >= card.subtotal()