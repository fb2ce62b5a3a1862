"""Romaji transition graph (DAG) construction over a kana string."""

from functools import lru_cache
from typing import List, Optional

from kanatype.config import DAG_CACHE_SIZE
from kanatype.logger import logger
from kanatype.nlp.base import BaseDagBuilder, Dag
from kanatype.nlp.japanese.normalizer import normalize_kana
from kanatype.nlp.japanese.table import GOOGLE_IME_TABLE, RomajiTable
from kanatype.schema import Edge

SMALL_TSU = "っ"
NASAL_N = "ん"

# Consonants that are doubled to type a preceding small tsu ("kka" → っか)
GEMINATE_CONSONANTS = frozenset("qvlxkgszjtdhfbpmyrwc")

# A bare "n" before these would be read as part of the next kana's spelling
NASAL_AMBIGUOUS_FOLLOWERS = frozenset("あいうえおぁぃぅぇぉゃゅょ")

class KanaDagBuilder(BaseDagBuilder):
    """Builds the graph of accepted romaji spellings between kana positions.

    ``dag[i]`` lists the edges leaving kana index ``i``: typing ``edge.spelling``
    there advances the cursor to ``edge.target``. Node ``len(kana)`` is terminal.
    """

    def __init__(self, table: Optional[RomajiTable] = None, cache_size: int = DAG_CACHE_SIZE):
        """Initialize the builder over *table* (the Google IME table by default)."""
        self._table = table if table is not None else GOOGLE_IME_TABLE
        if cache_size > 0:
            self._build_normalized = lru_cache(maxsize=cache_size)(self._build_normalized)

    @property
    def table(self) -> RomajiTable:
        return self._table

    def build(self, kana: str) -> Dag:
        """
        Build the romaji DAG for *kana*.

        Never fails: characters the table does not know are passed through as
        their own single-character spelling. The empty string yields a single
        terminal node.

        Args:
            kana: Target string; normalized here as well (katakana, full-width
                alphanumerics and case are folded)

        Returns:
            Tuple of ``len(kana) + 1`` tuples of edges
        """
        return self._build_normalized(normalize_kana(kana))

    def _build_normalized(self, kana: str) -> Dag:
        length = len(kana)
        nodes: List[List[Edge]] = [[] for _ in range(length + 1)]

        for size in range(1, self._table.MAX_UNIT_LENGTH + 1):
            for i in range(length - size + 1):
                for spelling in self._table.lookup(kana[i:i + size]):
                    nodes[i].append(Edge(target=i + size, spelling=spelling))

        self._add_geminate_edges(kana, nodes)
        self._add_nasal_edges(kana, nodes)
        self._add_fallback_edges(kana, nodes)

        logger.debug(f"Built romaji DAG for '{kana}': {sum(len(edges) for edges in nodes)} edges")
        return tuple(tuple(edges) for edges in nodes)

    @staticmethod
    def _add_geminate_edges(kana: str, nodes: List[List[Edge]]) -> None:
        # Right to left: node i borrows from node i+1, which may itself be a small tsu
        for i in range(len(kana) - 2, -1, -1):
            if kana[i] != SMALL_TSU:
                continue
            for edge in list(nodes[i + 1]):
                consonant = edge.spelling[0]
                if consonant in GEMINATE_CONSONANTS:
                    nodes[i].append(Edge(target=edge.target, spelling=consonant + edge.spelling))

    @staticmethod
    def _add_nasal_edges(kana: str, nodes: List[List[Edge]]) -> None:
        for i, ch in enumerate(kana):
            if ch != NASAL_N:
                continue
            if i == len(kana) - 1 or kana[i + 1] not in NASAL_AMBIGUOUS_FOLLOWERS:
                nodes[i].append(Edge(target=i + 1, spelling="n"))

    @staticmethod
    def _add_fallback_edges(kana: str, nodes: List[List[Edge]]) -> None:
        for i, ch in enumerate(kana):
            if not nodes[i]:
                nodes[i].append(Edge(target=i + 1, spelling=ch))
