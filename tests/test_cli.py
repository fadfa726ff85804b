import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from game import GameState, SeededRandomProvider
from guess_core import cli


class _FixedProvider:
    def __init__(self, value):
        self.value = value

    def next_uniform(self, bound):
        return min(self.value, bound)


def _run_play(game, lines):
    buf = io.StringIO()
    with patch("builtins.input", side_effect=list(lines) + [EOFError()]):
        with redirect_stdout(buf):
            cli.play(game)
    return buf.getvalue()


class TestCli(unittest.TestCase):
    def test_given_text_when_parsing_then_numbers_or_original_text(self):
        self.assertEqual(cli.parse_number(" 42 "), 42)
        self.assertEqual(cli.parse_number("7.0"), 7.0)
        self.assertEqual(cli.parse_number("abc"), "abc")
        self.assertEqual(cli.parse_number("9" * 5000), 10 ** 5000 - 1)

    def test_given_guesses_when_playing_then_feedback_and_attempts_printed(self):
        game = GameState(10, rng=_FixedProvider(7))
        out = _run_play(game, ["3", "9", "7", "5"])
        self.assertIn("Too low (attempts: 1)", out)
        self.assertIn("Too high (attempts: 2)", out)
        self.assertIn("Correct! (attempts: 3)", out)
        self.assertIn("You already won. Restart to play again.", out)
        self.assertEqual(game.get_attempts(), 3)

    def test_given_bad_input_when_playing_then_error_message_and_loop_continues(self):
        game = GameState(10, rng=_FixedProvider(7))
        out = _run_play(game, ["", "abc", "0", "11", "7"])
        self.assertIn("Please enter a valid whole number.", out)
        self.assertIn("Enter a number between 1 and 10.", out)
        self.assertIn("Correct! (attempts: 1)", out)

    def test_given_restart_commands_when_playing_then_game_reset(self):
        game = GameState(10, rng=_FixedProvider(7))
        out = _run_play(game, ["7", "restart", "restart 50", "restart 0", "quit", "7"])
        self.assertIn("New game. Range is 1..10.", out)
        self.assertIn("New game. Range is 1..50.", out)
        self.assertIn("Max must be a positive integer.", out)
        self.assertEqual(game.get_bound(), 50)
        self.assertEqual(game.get_attempts(), 0)

    def test_given_seed_when_running_main_then_exit_zero(self):
        buf = io.StringIO()
        with patch("builtins.input", side_effect=["quit"]):
            with redirect_stdout(buf):
                code = cli.main(["--max", "20", "--seed", "3"])
        self.assertEqual(code, 0)
        self.assertIn("between 1 and 20", buf.getvalue())

    def test_given_invalid_max_when_running_main_then_exit_two(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = cli.main(["--max", "0"])
        self.assertEqual(code, 2)
        self.assertIn("error: Max must be a positive integer.", buf.getvalue())

    def test_given_seeded_runs_then_same_secret(self):
        a = GameState(100, rng=SeededRandomProvider(9))
        b = GameState(100, rng=SeededRandomProvider(9))
        for v in range(1, 101):
            ra = a.guess(v)
            rb = b.guess(v)
            self.assertEqual(ra, rb)
            if ra.correct:
                break


if __name__ == "__main__":
    unittest.main(verbosity=2)
