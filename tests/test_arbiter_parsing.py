"""Tests for command parsing, result formatting and the command-line driver."""

import io
import json
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.arbiter import (
    Card, Color, CommandParseError, EndReason, GameResult,
    StartNewGameAction, TellColorAction, TellRankAction, PlayCardAction, DropCardAction,
    parse_card, parse_color, parse_command, parse_commands, format_result,
)
from scripts.run_arbiter import main, run


class TestParseCard:
    """Tests for card abbreviations."""

    def test_valid_cards(self):
        assert parse_card("R1") == Card(rank=1, color=Color.RED)
        assert parse_card("G2") == Card(rank=2, color=Color.GREEN)
        assert parse_card("B3") == Card(rank=3, color=Color.BLUE)
        assert parse_card("Y4") == Card(rank=4, color=Color.YELLOW)
        assert parse_card("W5") == Card(rank=5, color=Color.WHITE)

    def test_str_round_trips(self):
        assert str(parse_card("Y4")) == "Y4"

    @pytest.mark.parametrize("text", ["X1", "R0", "R6", "R", "R12", "r1", "RR"])
    def test_invalid_cards(self, text):
        with pytest.raises(CommandParseError):
            parse_card(text)

    def test_cards_are_hashable_values(self):
        assert len({parse_card("R1"), parse_card("R1"), parse_card("G1")}) == 2


class TestParseColor:
    """Tests for color names."""

    def test_case_insensitive(self):
        assert parse_color("Red") == Color.RED
        assert parse_color("WHITE") == Color.WHITE

    def test_unknown_color(self):
        with pytest.raises(CommandParseError):
            parse_color("Purple")


class TestParseCommand:
    """Tests for the command grammar."""

    def test_start_new_game(self):
        action = parse_command("Start new game with deck R1 G2 B3")
        assert isinstance(action, StartNewGameAction)
        assert [str(c) for c in action.cards] == ["R1", "G2", "B3"]

    def test_tell_color(self):
        action = parse_command("Tell color Red for cards 0 3 4")
        assert isinstance(action, TellColorAction)
        assert action.color == Color.RED
        assert action.card_indices == [0, 3, 4]

    def test_tell_rank(self):
        action = parse_command("Tell rank 2 for cards 1")
        assert isinstance(action, TellRankAction)
        assert action.rank == 2
        assert action.card_indices == [1]

    def test_play_and_drop(self):
        play = parse_command("Play card 3")
        drop = parse_command("Drop card 0")
        assert isinstance(play, PlayCardAction) and play.card_index == 3
        assert isinstance(drop, DropCardAction) and drop.card_index == 0

    def test_unrecognized_line(self):
        assert parse_command("Shuffle the deck") is None
        assert parse_command("") is None

    def test_bad_card_in_deck(self):
        with pytest.raises(CommandParseError):
            parse_command("Start new game with deck R1 Q2")

    def test_rank_out_of_range(self):
        with pytest.raises(CommandParseError):
            parse_command("Tell rank 7 for cards 0")

    def test_unknown_hint_color(self):
        with pytest.raises(CommandParseError):
            parse_command("Tell color Black for cards 0")

    def test_parse_commands_strips_newlines(self):
        actions = list(parse_commands(["Play card 1\n", "nonsense\r\n"]))
        assert isinstance(actions[0], PlayCardAction)
        assert actions[1] is None


class TestFormatting:
    """Tests for result output."""

    def test_format_result(self):
        result = GameResult(turns=7, played_cards=3, risked_turns=1, end_reason=EndReason.ILLEGAL_PLAY)
        assert format_result(result) == "Turn: 7, cards: 3, with risk: 1"


TRANSCRIPT = """\
Start new game with deck R1 R2 R3 R4 R5 G1 G2 G3 G4 G5 B1 B2 B3
Tell rank 1 for cards 0
Play card 0
Play card 0
Play card 3
Play card 0
Start new game with deck R1 R2 R3 R4 R5 G1 G2 G3 G4 G5 B1 B2
Drop card 0
Drop card 0
"""


class TestRunArbiter:
    """Tests for the command-line driver."""

    def test_run_prints_each_game(self):
        out = io.StringIO()
        games = run(io.StringIO(TRANSCRIPT), out)
        assert games == 2
        assert out.getvalue().splitlines() == [
            "Turn: 4, cards: 2, with risk: 1",
            "Turn: 2, cards: 0, with risk: 0",
        ]

    def test_run_json(self):
        out = io.StringIO()
        run(io.StringIO(TRANSCRIPT), out, as_json=True)
        first = json.loads(out.getvalue().splitlines()[0])
        assert first["end_reason"] == "ILLEGAL_PLAY"
        assert first["turns"] == 4

    def test_main_reads_file(self, tmp_path, capsys):
        path = tmp_path / "games.txt"
        path.write_text(TRANSCRIPT)
        assert main(["--input", str(path)]) == 0
        assert capsys.readouterr().out.splitlines()[1] == "Turn: 2, cards: 0, with risk: 0"

    def test_main_rejects_malformed_input(self, tmp_path):
        path = tmp_path / "games.txt"
        path.write_text("Start new game with deck R1 Z9\n")
        assert main(["--input", str(path)]) == 1
