import pytest

from wordgrid.engine import score, is_solved
from wordgrid.models import LetterStatus

C, P, A = LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT


def test_trace_against_crane():
    assert score("TRACE", "CRANE") == [A, C, C, P, C]


def test_exact_guess_is_all_correct():
    statuses = score("CRANE", "CRANE")
    assert statuses == [C] * 5
    assert is_solved(statuses)


def test_no_shared_letters():
    assert score("BUILT", "CRANE") == [A] * 5


def test_repeated_letter_is_present_twice_by_default():
    # CRANE holds a single A, already matched at position 2
    assert score("ALARM", "CRANE") == [P, A, C, P, A]


def test_repeated_letter_with_duplicate_counting():
    assert score("ALARM", "CRANE", count_duplicates=True) == [A, A, C, P, A]


def test_duplicate_counting_allows_one_present_per_occurrence():
    # SPEED holds two E's; the third E in the guess finds none left
    assert score("EERIE", "SPEED", count_duplicates=True) == [P, P, A, A, A]
    assert score("EERIE", "SPEED") == [P, P, A, A, P]


def test_accepts_letter_sequences_and_lowercase():
    assert score(["t", "r", "a", "c", "e"], "crane") == [A, C, C, P, C]


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        score("CRAN", "CRANE")


def test_is_solved_needs_every_cell_correct():
    assert not is_solved([C, C, P, C, C])
    assert not is_solved([])
