"""Tests for the terminal boundary and entry point."""

import pytest

from aflad.main import main
from aflad.models.card import Card, Suit
from aflad.models.player import Player
from aflad.utils.prompt import TerminalCardSelector, ask_player_count, ask_player_names


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input()."""
    prompts = []

    def feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            return next(remaining)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return feed


@pytest.fixture
def player():
    p = Player(name="Alice")
    p.receive_cards([Card(suit=Suit.LOVE, rank=3), Card(suit=Suit.ACE, rank=10)])
    return p


class TestPrompts:
    """Tests for setup prompts."""

    @pytest.mark.parametrize(
        "answer, expected",
        [("3", 3), ("", 2), ("1", 2), ("0", 2), ("many", 2), (" 4 ", 4)],
    )
    def test_player_count(self, answers, answer, expected):
        """Test the player count prompt and its clamp."""
        answers(answer)
        assert ask_player_count() == expected

    def test_player_count_default(self, answers):
        """Test a configured default count."""
        answers("")
        assert ask_player_count(default=4) == 4

    def test_player_count_above_maximum(self, answers, capsys):
        """Test that too many players are asked for again."""
        prompts = answers("9", "12", "8")

        assert ask_player_count(maximum=8) == 8
        assert len(prompts) == 3
        assert capsys.readouterr().out.count("At most 8 players can play.") == 2

    def test_default_capped_by_maximum(self, answers):
        """Test that the default never exceeds the maximum."""
        answers("")
        assert ask_player_count(default=6, maximum=4) == 4

    def test_player_names(self, answers):
        """Test that blank names get defaults."""
        prompts = answers("Alice", "", "  Bob ")

        assert ask_player_names(3) == ["Alice", "Player 2", "Bob"]
        assert prompts[0] == "Enter name for Player 1: "


class TestTerminalCardSelector:
    """Tests for TerminalCardSelector."""

    def test_shows_hand_and_returns_index(self, answers, player, capsys):
        """Test a valid 1-based choice."""
        prompts = answers("2")

        index = TerminalCardSelector()(player, range(2))

        assert index == 1
        assert prompts == ["Alice, select a card to play (1-2): "]
        out = capsys.readouterr().out
        assert "Alice's hand:" in out
        assert "1. Love 3" in out
        assert "2. Ace 10" in out

    def test_reprompts_on_bad_input(self, answers, player, capsys):
        """Test that invalid answers are retried."""
        prompts = answers("0", "3", "abc", "", "1")

        index = TerminalCardSelector()(player, range(2))

        assert index == 0
        assert len(prompts) == 5
        assert capsys.readouterr().out.count("Invalid selection. Please try again.") == 4


class TestMain:
    """Tests for the main entry point."""

    def test_full_game(self, answers, capsys):
        """Test a scripted two-player game from start to finish."""
        answers("Alice", "Bob", *["1"] * 10)

        assert main(["-n", "2", "--seed", "7"]) == 0

        out = capsys.readouterr().out
        assert "Welcome to Ace, Flower, Love & Diamond!" in out
        assert "Love beats Diamond regardless of rank" in out
        assert "=== Round 1 ===" in out
        assert "=== Round 5 ===" in out
        assert "=== Round 6 ===" not in out
        assert "Alice plays: " in out
        assert "wins the round with" in out
        assert "Current Scores:" in out
        assert "=== Game Over ===" in out
        assert "wins the game with" in out or "It's a tie between" in out

    def test_prompts_for_player_count(self, answers, capsys):
        """Test that the player count is asked for without -n."""
        prompts = answers("", "", "", *["1"] * 10)

        assert main(["--seed", "1"]) == 0
        assert prompts[0].strip().startswith("Enter number of players")
        assert "Player 1 plays: " in capsys.readouterr().out

    def test_hand_size_override(self, answers, capsys):
        """Test a shorter game with a smaller hand."""
        answers("A", "B", *["1"] * 4)

        assert main(["-n", "2", "--hand-size", "2", "--seed", "3"]) == 0

        out = capsys.readouterr().out
        assert "Each player gets 2 cards" in out
        assert "=== Round 2 ===" in out
        assert "=== Round 3 ===" not in out

    def test_game_log(self, answers, tmp_path, capsys):
        """Test that --game-log writes a record."""
        answers("Alice", "Bob", *["1"] * 10)

        assert main(["-n", "2", "--game-log", str(tmp_path)]) == 0

        logs = list(tmp_path.glob("*_Alice_Bob.jsonl"))
        assert len(logs) == 1
        assert logs[0].read_text(encoding="utf-8").count("\n") == 7

    def test_interrupted(self, monkeypatch, capsys):
        """Test that end of input stops the game cleanly."""

        def closed(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)

        assert main(["-n", "2"]) == 1
        assert "Game interrupted" in capsys.readouterr().out

    def test_too_many_players(self, answers):
        """Test that a deal larger than the deck is reported as an error."""
        answers(*[""] * 9)
        assert main(["-n", "9"]) == 1

    def test_prompt_caps_player_count(self, answers, capsys):
        """Test that the prompt refuses more players than the deck can deal."""
        prompts = answers("9", "", *[""] * 2, *["1"] * 10)

        assert main(["--seed", "2"]) == 0

        assert sum(p.startswith("\nEnter number of players") for p in prompts) == 2
        assert "At most 8 players can play." in capsys.readouterr().out

    @pytest.mark.parametrize("hand_size", ["0", "-2", "21"])
    def test_invalid_hand_size(self, hand_size, capsys):
        """Test that unusable hand sizes are rejected before the game starts."""
        with pytest.raises(SystemExit) as exc_info:
            main(["-n", "2", "--hand-size", hand_size])

        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "Welcome" not in captured.out
        assert "hand" in captured.err
