"""Live romaji input prediction against a kana target."""

from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

from kanatype.logger import logger
from kanatype.nlp.base import BaseDagBuilder, BasePredictor, Dag, DagInvariantError
from kanatype.nlp.japanese.dag import KanaDagBuilder
from kanatype.nlp.japanese.normalizer import normalize_romaji
from kanatype.schema import Edge, PredictionResult

@dataclass(frozen=True)
class PredictionState:
    """
    Cursor threaded through the prediction phases.

    Attributes:
        tar_idx: Current kana node
        rom_idx: Number of romaji characters consumed
        confirmed_idx: Kana node reached by fully typed spellings
        hit: Accepted romaji fragments, in order
        rem: Romaji still to be typed, in order
    """
    tar_idx: int = 0
    rom_idx: int = 0
    confirmed_idx: int = 0
    hit: Tuple[str, ...] = ()
    rem: Tuple[str, ...] = ()


def edge_priority(edge: Edge) -> Tuple[int, int]:
    """Sort key: farthest target first, then shortest spelling."""
    return -edge.target, len(edge.spelling)

def order_dag(dag: Dag) -> Dag:
    """Return *dag* with every node's edges in traversal priority order.

    The sort is stable, so table order breaks remaining ties.
    """
    return tuple(tuple(sorted(edges, key=edge_priority)) for edges in dag)

def common_prefix_length(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def commit_full_spellings(dag: Dag, romaji: str, state: PredictionState) -> PredictionState:
    """Consume every complete spelling the buffer spells out from the current node."""
    terminal = len(dag) - 1
    tar_idx, rom_idx, hit = state.tar_idx, state.rom_idx, state.hit
    while tar_idx < terminal and rom_idx < len(romaji):
        for edge in dag[tar_idx]:
            if romaji.startswith(edge.spelling, rom_idx):
                hit += (edge.spelling,)
                tar_idx = edge.target
                rom_idx += len(edge.spelling)
                break
        else:
            break
    return replace(state, tar_idx=tar_idx, rom_idx=rom_idx, confirmed_idx=tar_idx, hit=hit)

def commit_partial_spelling(dag: Dag, romaji: str, state: PredictionState) -> PredictionState:
    """Enter the kana unit whose spelling shares the longest prefix with the rest of the buffer.

    The earliest edge wins ties. The untyped tail of that spelling becomes the
    first pending fragment.
    """
    if state.tar_idx >= len(dag) - 1:
        return state

    rest = romaji[state.rom_idx:]
    best: Optional[Edge] = None
    best_len = 0
    for edge in dag[state.tar_idx]:
        n = common_prefix_length(edge.spelling, rest)
        if n > best_len:
            best, best_len = edge, n
    if best is None:
        return state

    return replace(
        state,
        tar_idx=best.target,
        rom_idx=state.rom_idx + best_len,
        hit=state.hit + (best.spelling[:best_len],),
        rem=state.rem + (best.spelling[best_len:],),
    )

def complete_pending(dag: Dag, kana: str, state: PredictionState) -> PredictionState:
    """Follow top-priority edges to the terminal node, collecting what is left to type."""
    terminal = len(dag) - 1
    tar_idx, rem = state.tar_idx, state.rem
    while tar_idx < terminal:
        if not dag[tar_idx]:
            logger.error(f"Romaji DAG for '{kana}' has a dead end at node {tar_idx}")
            raise DagInvariantError(kana, tar_idx, "non-terminal node has no outgoing edges")
        edge = dag[tar_idx][0]
        if edge.target <= tar_idx:
            logger.error(f"Romaji DAG for '{kana}' has a backward edge at node {tar_idx}")
            raise DagInvariantError(kana, tar_idx, f"edge {edge.spelling!r} does not move forward")
        rem += (edge.spelling,)
        tar_idx = edge.target
    return replace(state, tar_idx=tar_idx, rem=rem)


class RomajiPredictor(BasePredictor):
    """Classifies a live romaji buffer into hit / remaining / deletable parts."""

    def __init__(self, builder: Optional[BaseDagBuilder] = None):
        self._builder = builder if builder is not None else KanaDagBuilder()

    @property
    def builder(self) -> BaseDagBuilder:
        return self._builder

    def build_dag(self, kana: str) -> Dag:
        """Return the DAG of *kana* as built, in table order."""
        return self._builder.build(kana)

    def ordered_dag(self, kana: str) -> Dag:
        """Return the DAG of *kana* with edges in traversal priority order."""
        return order_dag(self._builder.build(kana))

    def predict(self, kana: str, romaji: str) -> PredictionResult:
        """
        Walk the DAG of *kana* with the typed *romaji*.

        Args:
            kana: Target kana string
            romaji: Whatever the user has typed so far (any case, possibly over-typed)

        Returns:
            PredictionResult splitting *romaji* into accepted and deletable parts,
            plus the romaji still needed to finish *kana*
        """
        romaji = normalize_romaji(romaji)
        dag = self.ordered_dag(kana)

        state = commit_full_spellings(dag, romaji, PredictionState())
        state = commit_partial_spelling(dag, romaji, state)
        entered_idx = state.tar_idx
        state = complete_pending(dag, kana, state)

        result = PredictionResult(
            hit_kana=kana[:state.confirmed_idx],
            hit_romaji="".join(state.hit),
            rem_romaji="".join(state.rem),
            del_romaji=romaji[state.rom_idx:],
            partial_kana=kana[state.confirmed_idx:entered_idx],
        )
        logger.debug(f"Predicted '{romaji}' against '{kana}': {result}")
        return result

    def default_romaji(self, kana: str) -> str:
        """Return the top-priority romaji spelling of the whole of *kana*."""
        return self.predict(kana, "").rem_romaji

    def iter_spellings(self, kana: str, limit: Optional[int] = None) -> Iterator[str]:
        """
        Yield every full romaji spelling of *kana* accepted by its DAG.

        Spellings come depth-first in edge priority order, so the first one is
        ``default_romaji(kana)``.

        Args:
            kana: Target kana string
            limit: Stop after this many spellings (the count grows exponentially
                with the string's length)
        """
        if limit is not None and limit <= 0:
            return
        dag = self.ordered_dag(kana)
        terminal = len(dag) - 1
        count = 0
        # Stack of (node, spelling so far); pushed in reverse so priority order pops first
        stack = [(0, "")]
        while stack:
            node, prefix = stack.pop()
            if node == terminal:
                yield prefix
                count += 1
                if limit is not None and count >= limit:
                    return
                continue
            for edge in reversed(dag[node]):
                stack.append((edge.target, prefix + edge.spelling))
