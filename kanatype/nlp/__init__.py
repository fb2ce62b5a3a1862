"""Kana input processing module for kanatype

This module provides the romaji transition graph builder and the live romaji
predictor, together with the mapping tables they run on.
"""

from typing import Optional

from .base import BaseDagBuilder, BasePredictor, DagInvariantError, RomajiTableError

def get_romaji_table(scheme: str):
    """Get the kana→romaji mapping table of a romanization scheme.

    Args:
        scheme: Scheme name ('google' or 'google_ime' for the Google Japanese Input table)

    Returns:
        RomajiTable instance

    Raises:
        ValueError: If scheme is not supported
    """
    scheme = scheme.lower()

    if scheme in ['google', 'google_ime']:
        from .japanese.table import GOOGLE_IME_TABLE
        return GOOGLE_IME_TABLE
    else:
        raise ValueError(f"Unsupported romanization scheme: {scheme}")

def get_dag_builder(scheme: str = 'google', table=None) -> BaseDagBuilder:
    """Get a DAG builder for the specified scheme.

    Args:
        scheme: Scheme name, ignored when *table* is given
        table: Explicit RomajiTable to build over

    Returns:
        KanaDagBuilder instance

    Raises:
        ValueError: If scheme is not supported
    """
    from .japanese.dag import KanaDagBuilder
    if table is None:
        table = get_romaji_table(scheme)
    return KanaDagBuilder(table)

def get_predictor(scheme: str = 'google', table=None) -> BasePredictor:
    """Get a romaji predictor for the specified scheme.

    Args:
        scheme: Scheme name, ignored when *table* is given
        table: Explicit RomajiTable to predict against

    Returns:
        RomajiPredictor instance

    Raises:
        ValueError: If scheme is not supported
    """
    from .japanese.predictor import RomajiPredictor
    return RomajiPredictor(get_dag_builder(scheme, table))

__all__ = [
    'BaseDagBuilder',
    'BasePredictor',
    'DagInvariantError',
    'RomajiTableError',
    'get_romaji_table',
    'get_dag_builder',
    'get_predictor',
]
