from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import default_bound, env_flag
from .errors import GuessError
from .rng import RandomProvider, SecureRandomProvider, SeededRandomProvider
from .state import CORRECT, HIGH, LOW, GameState, parse_number

FEEDBACK = {LOW: "Too low", HIGH: "Too high", CORRECT: "Correct!"}


def play(game: GameState) -> None:
    print(f"I'm thinking of a number between 1 and {game.get_bound()}.")
    print("Type a guess, 'restart [max]' for a new number, or 'quit'.")
    while True:
        try:
            text = input('Your guess: ').strip()
        except EOFError:
            print()
            return
        if not text:
            continue
        words = text.split()
        cmd = words[0].lower()
        if cmd in ('quit', 'exit', 'q'):
            return
        try:
            if cmd in ('restart', 'r'):
                bound = parse_number(words[1]) if len(words) > 1 else None
                game.reset(bound)
                print(f"New game. Range is 1..{game.get_bound()}.")
                continue
            res = game.guess(parse_number(text))
        except GuessError as e:
            print(e.message)
            continue
        print(f"{FEEDBACK[res.result]} (attempts: {res.attempts})")
        if res.correct:
            print("Type 'restart' to play again or 'quit' to leave.")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Guess the hidden number')
    parser.add_argument('--max', type=int, default=None, help='Upper bound of the range (default: GUESS_DEFAULT_BOUND or 100)')
    parser.add_argument('--seed', type=int, default=None, help='Deterministic secret for practice (not secure)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    debug = args.debug or env_flag('GUESS_DEBUG')
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format='%(levelname)s %(name)s: %(message)s')

    rng: RandomProvider = SeededRandomProvider(args.seed) if args.seed is not None else SecureRandomProvider()
    bound = args.max if args.max is not None else default_bound()
    try:
        game = GameState(bound, rng=rng)
    except GuessError as e:
        print(f"error: {e.message}")
        return 2
    play(game)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
