"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

@pytest.fixture
def fixture_table():
    """Small mapping table: enough kana for か/な/ん/っ/し tests."""
    from kanatype.nlp.japanese.table import RomajiTable
    return RomajiTable([
        ("か", ("ka", "ca")),
        ("な", ("na",)),
        ("ん", ("nn", "xn")),
        ("っ", ("xtu",)),
        ("し", ("shi", "si")),
        ("しゃ", ("sha", "sya")),
    ])

@pytest.fixture
def builder():
    """DAG builder over the Google IME table."""
    from kanatype.nlp.japanese.dag import KanaDagBuilder
    return KanaDagBuilder()

@pytest.fixture
def predictor():
    """Romaji predictor over the Google IME table."""
    from kanatype.nlp.japanese.predictor import RomajiPredictor
    return RomajiPredictor()

@pytest.fixture
def sample_kana():
    """Kana strings covering digraphs, small tsu, nasals and pass-through characters."""
    return [
        "",
        "か",
        "かな",
        "ろーまじ",
        "きゃく",
        "っか",
        "がっこう",
        "っっか",
        "んあ",
        "んな",
        "しんぶん",
        "こんにちは",
        "ちょっと",
        "ゔぁいおりん",
        "カタカナ",
        "abc!",
        "にほんご、すき。",
        "ヵ月",
    ]
