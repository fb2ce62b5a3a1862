"""Japanese kana/romaji processing module."""

from .normalizer import normalize_kana, normalize_romaji
from .table import RomajiTable, GOOGLE_IME_ENTRIES, GOOGLE_IME_TABLE
from .dag import KanaDagBuilder
from .predictor import RomajiPredictor, PredictionState

__all__ = [
    'normalize_kana',
    'normalize_romaji',
    'RomajiTable',
    'GOOGLE_IME_ENTRIES',
    'GOOGLE_IME_TABLE',
    'KanaDagBuilder',
    'RomajiPredictor',
    'PredictionState',
]
