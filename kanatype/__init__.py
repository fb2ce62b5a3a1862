"""
kanatype: live romaji input prediction for Japanese kana

Basic Usage:
    import kanatype

    result = kanatype.predict("かな", "kani")
    result.hit_kana     # "か"
    result.hit_romaji   # "kan"
    result.rem_romaji   # "a"
    result.del_romaji   # "i"
"""

from typing import Iterator, Optional

from kanatype.config import DEFAULT_SCHEME
from kanatype.nlp import get_predictor
from kanatype.nlp.base import Dag
from kanatype.schema import Edge, PredictionResult

__version__ = "0.1.0"

_predictor = None

def _default_predictor():
    global _predictor
    if _predictor is None:
        _predictor = get_predictor(DEFAULT_SCHEME)
    return _predictor

def build_dag(kana: str) -> Dag:
    """Build the romaji DAG of *kana* with the default scheme."""
    return _default_predictor().build_dag(kana)

def predict(kana: str, romaji: str) -> PredictionResult:
    """Classify the typed *romaji* against *kana* with the default scheme."""
    return _default_predictor().predict(kana, romaji)

def default_romaji(kana: str) -> str:
    return _default_predictor().default_romaji(kana)

def iter_spellings(kana: str, limit: Optional[int] = None) -> Iterator[str]:
    return _default_predictor().iter_spellings(kana, limit)

__all__ = [
    'build_dag',
    'predict',
    'default_romaji',
    'iter_spellings',
    'Edge',
    'PredictionResult',
    '__version__',
]
