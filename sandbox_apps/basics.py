"""Small demonstrations: string slicing, filtering, grouping and lookups."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class User:
    """A user account record."""

    active: bool
    username: str
    email: str
    sign_in_count: int


def get_first_word(sentence: str) -> str:
    """Return the text before the first space, or the whole sentence if none."""
    return sentence.split(" ", 1)[0]


def even_filter(values: Iterable[int]) -> list[int]:
    """Return the even numbers of ``values`` in their original order."""
    return [value for value in values if value % 2 == 0]


def doubled(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by two."""
    return [2 * value for value in values]


def group_by_values(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a mapping from key/value pairs; a later pair replaces an earlier one."""
    return dict(pairs)


def lookup_user(users: Mapping[str, V], name: str) -> Optional[V]:
    """Return the value stored for ``name``, or None if it is absent."""
    return users.get(name)


def _swap_demo() -> None:
    a, b = 1, 5
    print(f"A: {a}, B: {b}")
    a, b = b, a
    print(f"A: {a}, B: {b}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the demonstrations and print their results."""
    parser = argparse.ArgumentParser(prog="basics", description=__doc__)
    parser.parse_args(argv)

    User(
        active=True,
        username="ig_raaz",
        email="user@example.com",
        sign_in_count=678,
    )

    first_word = get_first_word("Entschudigung, milch bitte!")
    print(f"The first word is: {first_word}")
    _swap_demo()

    scores = group_by_values([("Deustch", 32), ("Deustch", 31)])
    score = lookup_user(scores, "Deustch")
    print(f"We got {score}" if score is not None else "We got nothing :(")

    numbers = [1, 2, 4, 5, 6, 7, 8, 9, 10]
    print("Double Values: " + "".join(f"{v} " for v in doubled(numbers)))
    print("Even Values: " + "".join(f"{v} " for v in even_filter(numbers)))

    users = group_by_values([("Raj", 1053), ("Anuska", 1054)])
    user_id = lookup_user(users, "Manobendra")
    print(f"First User ID: {user_id}" if user_id is not None else "No User ID found")

    age, name = 21, "Manobendra"
    print(f'Tuple: ({age}, "{name}")')
    grouped = group_by_values(
        [(21, "Manobendra"), (34, "Pawan"), (12, "Ang Thilen")]
    )
    for key, value in grouped.items():
        print(f"Key: {key}, Value: {value}")

    print("Hello, world!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())