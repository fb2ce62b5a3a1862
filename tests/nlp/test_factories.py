"""Tests for scheme factories."""
import pytest
from kanatype.nlp import get_dag_builder, get_predictor, get_romaji_table
from kanatype.nlp.japanese.dag import KanaDagBuilder
from kanatype.nlp.japanese.predictor import RomajiPredictor
from kanatype.nlp.japanese.table import GOOGLE_IME_TABLE


class TestFactories:
    """Test scheme lookup and table injection."""

    @pytest.mark.parametrize("scheme", ["google", "GOOGLE", "google_ime"])
    def test_google_scheme(self, scheme):
        """Test the accepted spellings of the default scheme name."""
        assert get_romaji_table(scheme) is GOOGLE_IME_TABLE

    def test_unknown_scheme(self):
        """Test that unknown schemes raise ValueError."""
        with pytest.raises(ValueError, match="kunrei"):
            get_romaji_table("kunrei")
        with pytest.raises(ValueError):
            get_predictor("kunrei")

    def test_builder(self):
        """Test the builder factory."""
        builder = get_dag_builder()
        assert isinstance(builder, KanaDagBuilder)
        assert builder.table is GOOGLE_IME_TABLE

    def test_predictor_with_injected_table(self, fixture_table):
        """Test that an explicit table replaces the scheme's table."""
        predictor = get_predictor("kunrei", table=fixture_table)
        assert isinstance(predictor, RomajiPredictor)
        assert predictor.builder.table is fixture_table
