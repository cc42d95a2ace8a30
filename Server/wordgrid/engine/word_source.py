"""
Word Source

Supplies the hidden target word, one per game.
"""

import random
from typing import Iterable, List, Optional

from ..config.game_settings import validate_word_list_integrity


class WordListError(ValueError):
    """Raised when a target word is requested from an empty dictionary."""


class WordSource:
    """
    Draws target words uniformly at random, with replacement.

    Consecutive games may repeat the same word.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        """
        Raises:
            ValueError: If a word is blank or holds anything but letters A-Z
        """
        self.words: List[str] = [word.strip().upper() for word in words]
        if self.words:
            validate_word_list_integrity(self.words)
        self.rng = rng or random.Random()

    def draw(self) -> str:
        """
        Returns:
            str: An uppercase target word

        Raises:
            WordListError: If the dictionary is empty
        """
        if not self.words:
            raise WordListError("Cannot draw a target word from an empty word list")
        return self.rng.choice(self.words)

    def __len__(self) -> int:
        return len(self.words)
