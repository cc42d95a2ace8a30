"""
Game Configuration Constants Module

This module defines all game rule constants and the word dictionary loader.
All game parameters are centralized here to enable easy modification

"""

import json
import os
from typing import Dict, Final, List, Optional

from ..models.game import LetterStatus

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts (grid rows) allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Action keys sent by the on-screen keyboard
CLEAR_KEY: Final[str] = "CLEAR"
SUBMIT_KEY: Final[str] = "ENTER"

SHARE_GLYPHS: Final[Dict[LetterStatus, str]] = {
    LetterStatus.CORRECT: "\U0001F7E9",  # green square
    LetterStatus.PRESENT: "\U0001F7E8",  # yellow square
    LetterStatus.ABSENT: "\u2B1B",  # black square
}

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load word list from a JSON file.

    Words may have different lengths; each game takes its length from the
    drawn word.

    Args:
        json_file_path: Path to a JSON array of words (defaults to words.json)

    Returns:
        List[str]: List of uppercase words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or a word is invalid
    """
    json_file_path = json_file_path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [str(word).strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: No empty words
    2. Character validation: Only letters A-Z allowed
    3. Format validation: Consistent uppercase formatting

    Duplicates are tolerated; they only weight the random draw.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not word:
            raise ValueError(f"Word at index {index} is empty")

        if any(char not in ALPHABET for char in word.upper()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - word_lengths: Count of words per length
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters

    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    word_lengths = {}
    letter_frequency = {}
    for word in words:
        word_lengths[len(word)] = word_lengths.get(len(word), 0) + 1
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "word_lengths": word_lengths,
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        words = load_word_list(os.getenv("WORD_LIST_PATH"))
        print(" Word list validation passed")

        stats = get_word_statistics(words)
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
