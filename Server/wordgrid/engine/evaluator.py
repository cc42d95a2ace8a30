"""
Guess Evaluator

Scores a committed row letter by letter against the target word.
"""

from typing import List, Optional, Sequence

from ..models.game import LetterStatus


def score(row: Sequence[str], target: str, count_duplicates: bool = False) -> List[LetterStatus]:
    """
    Two-pass scoring of a full row against the target.

    The first pass marks exact position matches CORRECT. The second pass marks
    every remaining letter PRESENT when the target contains it anywhere and
    ABSENT otherwise. With the default membership check a letter guessed twice
    but present once in the target is PRESENT both times.

    Args:
        row: The guessed letters (a string or a sequence of single letters)
        target: The hidden word, same length as row
        count_duplicates: Consume target letters as they are matched, so each
            target occurrence can justify at most one CORRECT/PRESENT mark

    Returns:
        List[LetterStatus]: One status per position
    """
    guess = [letter.upper() for letter in row]
    target = target.upper()
    if len(guess) != len(target):
        raise ValueError(f"Row length {len(guess)} does not match target length {len(target)}")

    result: List[Optional[LetterStatus]] = [None] * len(target)
    remaining = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = LetterStatus.CORRECT
            remaining[i] = None  # type: ignore

    # Second pass: membership
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue

        if not count_duplicates:
            result[i] = LetterStatus.PRESENT if letter in target else LetterStatus.ABSENT
        elif letter in remaining:
            result[i] = LetterStatus.PRESENT
            remaining[remaining.index(letter)] = None  # type: ignore
        else:
            result[i] = LetterStatus.ABSENT

    return [status for status in result if status is not None]


def is_solved(statuses: Sequence[LetterStatus]) -> bool:
    return bool(statuses) and all(status == LetterStatus.CORRECT for status in statuses)
