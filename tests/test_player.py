import io

import pytest

from dicecard.player import HumanPlayer, RollDecision
from dicecard.scorecard import ScorableName, Scorecard
from dicecard.scoring import Ones, ThreeOfAKind, Twos


def _human(text, scorecard=None):
    out = io.StringIO()
    player = HumanPlayer(
        scorecard=scorecard or Scorecard(),
        input_stream=io.StringIO(text),
        output_stream=out,
    )
    return player, out


def test_roll_decision_keep_all():
    assert RollDecision([True] * 5).will_keep_all() is True
    assert RollDecision([True, True, False, True, True]).will_keep_all() is False


def test_roll_decision_behaves_as_tuple():
    decision = RollDecision([1, 0, 0, 1, 1])
    assert decision == (True, False, False, True, True)


def test_assess_roll_keeps_selected_values():
    player, _ = _human("12\n")
    assert player.assess_roll((1, 2, 3, 4, 5), 2) == (True, True, False, False, False)


def test_assess_roll_matches_duplicates_in_order():
    player, _ = _human("23\n")
    assert player.assess_roll((2, 2, 3, 3, 5), 1) == (True, False, True, False, False)


def test_assess_roll_empty_line_rerolls_everything():
    player, _ = _human("\n")
    decision = player.assess_roll((1, 2, 3, 4, 5), 2)
    assert decision == (False,) * 5
    assert not decision.will_keep_all()


def test_assess_roll_rejects_out_of_range_then_accepts():
    player, out = _human("7\n13\n")
    assert player.assess_roll((1, 2, 3, 4, 5), 2) == (True, False, True, False, False)
    assert "only enter numbers between 1 and 6" in out.getvalue()


def test_assess_roll_rejects_stray_character():
    player, out = _human("1a\n5\n")
    assert player.assess_roll((1, 2, 3, 4, 5), 2) == (False, False, False, False, True)
    assert "all values must be between 1 and 6" in out.getvalue()


def test_assess_roll_rejects_value_not_in_hand():
    player, out = _human("6\n4\n")
    assert player.assess_roll((1, 2, 3, 4, 5), 2) == (False, False, False, True, False)
    assert "only specify values you have, please, not 6" in out.getvalue()


def test_assess_roll_shows_the_roll():
    player, out = _human("\n")
    player.assess_roll((1, 2, 3, 4, 5), 2)
    assert out.getvalue().startswith("Roll: 1, 2, 3, 4, 5, \n")


def test_assess_roll_raises_at_end_of_input():
    player, _ = _human("")
    with pytest.raises(EOFError):
        player.assess_roll((1, 2, 3, 4, 5), 2)


def test_ensure_valid_response_repeats_until_valid():
    player, out = _human("x\n5\n")
    assert player.ensure_valid_response("pick", str.isdigit) == "5"
    assert out.getvalue().count("pick\n") == 2


def test_pick_scorable_first_row():
    player, _ = _human("1\n")
    assert player.pick_scorable((1, 1, 1, 2, 2)) == Ones()


def test_pick_scorable_rejects_computed_row():
    player, out = _human("7\n9\n")
    assert player.pick_scorable((1, 1, 1, 2, 2)) == ThreeOfAKind()
    assert "[9] to score 3 Of A Kind;" in out.getvalue()
    assert "[7] to score" not in out.getvalue()


def test_pick_scorable_rejects_scored_row():
    card = Scorecard()
    card.score((1, 1, 1, 2, 2), Ones())
    player, out = _human("1\n2\n", scorecard=card)
    assert player.pick_scorable((1, 1, 1, 2, 2)) == Twos()
    assert "[1] to score Ones" not in out.getvalue()
    assert "[2] to score Twos" in out.getvalue()


def test_pick_scorable_rejects_non_numbers():
    player, _ = _human("abc\n\n16\n1\n")
    assert player.pick_scorable((1, 2, 3, 4, 5)) == Ones()
    assert player.scorecard.score_for(ScorableName.ONES) is None