from abc import ABC, abstractmethod
from typing import Tuple

from kanatype.schema import Edge, PredictionResult

Dag = Tuple[Tuple[Edge, ...], ...]


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class DagInvariantError(Exception):
    """Raised when a romaji DAG breaks its structural guarantees.

    This is an internal-consistency failure, never a reaction to user input.
    """
    def __init__(self, kana: str, index: int, reason: str):
        super().__init__(
            f"Broken romaji DAG for '{kana}' at node {index}: {reason}"
        )
        self.kana = kana
        self.index = index
        self.reason = reason

class RomajiTableError(ValueError):
    """Raised when a kana→romaji mapping table is built from malformed data."""
    def __init__(self, unit: str, reason: str):
        super().__init__(f"Invalid romaji table entry '{unit}': {reason}")
        self.unit = unit
        self.reason = reason

class BaseDagBuilder(ABC):
    """Abstract base class for building romaji transition graphs over a kana string"""

    @abstractmethod
    def build(self, kana: str) -> Dag:
        """Return the N+1 node adjacency lists for *kana*"""
        pass

    def validate(self, kana: str, dag: Dag) -> None:
        """
        Check the structural guarantees every builder must give.

        Raises:
            DagInvariantError: if the node count is wrong, the terminal node has
                edges, a non-terminal node has none, or an edge does not move forward
        """
        if len(dag) != len(kana) + 1:
            raise DagInvariantError(kana, len(dag), f"expected {len(kana) + 1} nodes")
        if dag[-1]:
            raise DagInvariantError(kana, len(kana), "terminal node has outgoing edges")
        for i, edges in enumerate(dag[:-1]):
            if not edges:
                raise DagInvariantError(kana, i, "non-terminal node has no outgoing edges")
            for edge in edges:
                if not i < edge.target <= len(kana):
                    raise DagInvariantError(kana, i, f"edge {edge.spelling!r} targets {edge.target}")

class BasePredictor(ABC):
    """Abstract base class for live romaji input prediction"""

    @abstractmethod
    def predict(self, kana: str, romaji: str) -> PredictionResult:
        """Classify the *romaji* buffer against the *kana* target"""
        pass
