"""Tests for NLP base classes."""
import pytest
from kanatype.nlp.base import BaseDagBuilder, BasePredictor
from kanatype.schema import Edge, PredictionResult


class TestBaseDagBuilder:
    """Test BaseDagBuilder abstract class."""

    def test_build_not_implemented(self):
        """Test that BaseDagBuilder cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseDagBuilder()

    def test_concrete_implementation(self):
        """Test that a concrete implementation works and validates."""
        class VerbatimBuilder(BaseDagBuilder):
            def build(self, kana: str):
                nodes = tuple((Edge(target=i + 1, spelling=ch),) for i, ch in enumerate(kana))
                return nodes + ((),)

        builder = VerbatimBuilder()
        dag = builder.build("ab")
        assert dag[0] == (Edge(target=1, spelling="a"),)
        builder.validate("ab", dag)


class TestBasePredictor:
    """Test BasePredictor abstract class."""

    def test_predict_not_implemented(self):
        """Test that BasePredictor cannot be instantiated."""
        with pytest.raises(TypeError):
            BasePredictor()

    def test_concrete_implementation(self):
        """Test that a concrete implementation works."""
        class EchoPredictor(BasePredictor):
            def predict(self, kana: str, romaji: str):
                return PredictionResult(del_romaji=romaji)

        assert EchoPredictor().predict("か", "x").del_romaji == "x"
