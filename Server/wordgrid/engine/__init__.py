"""
Engine Package

The guess-grid engine: pure functions over immutable game values.
"""

from .evaluator import score, is_solved
from .input_controller import apply_key, normalize_key
from .share_encoder import encode
from .status import derive_status
from .word_source import WordSource, WordListError

__all__ = [
    'score', 'is_solved', 'apply_key', 'normalize_key', 'encode',
    'derive_status', 'WordSource', 'WordListError'
]
