"""Guess the fruit that was picked at random."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

FRUITS = ("grapes", "apples", "bananas", "pears", "kiwis")


def guess_checker(guessed_fruit: str, generated_fruit: str) -> bool:
    """Return True when the guess matches the generated fruit."""
    return guessed_fruit == generated_fruit


def pick_fruit(rng: Optional[random.Random] = None) -> str:
    """Pick one of the known fruits at random."""
    return (rng or random).choice(FRUITS)


def play(secret: str, lines: Iterable[str], out: TextIO) -> bool:
    """Read guesses from ``lines`` until one matches ``secret``.

    Returns True when the fruit was guessed, False if input ran out first.
    """
    for line in lines:
        choice = line.strip().lower()
        if choice not in FRUITS:
            out.write("Fruit not found in the list\n")
            continue
        if guess_checker(choice, secret):
            out.write("You guessed the fruit correctly\n")
            return True
        out.write("You guessed the fruit incorrectly, RETRY\n")
    return False


def main(argv: Optional[list[str]] = None) -> int:
    """Pick a fruit and let the user guess it from standard input."""
    parser = argparse.ArgumentParser(prog="guessing", description=__doc__)
    parser.parse_args(argv)
    secret = pick_fruit()
    print(f"Generated fruit: {secret}")
    play(secret, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())