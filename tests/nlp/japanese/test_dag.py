"""Tests for the romaji DAG builder."""
import pytest
from kanatype.nlp.base import DagInvariantError
from kanatype.nlp.japanese.dag import KanaDagBuilder, GEMINATE_CONSONANTS
from kanatype.schema import Edge


def spellings(edges):
    return [(edge.target, edge.spelling) for edge in edges]


class TestDagShape:
    """Structural guarantees of every built DAG."""

    def test_empty_string_is_single_terminal_node(self, builder):
        """Test that the empty string yields one node without edges."""
        assert builder.build("") == ((),)

    def test_node_count_and_forward_edges(self, builder, sample_kana):
        """Test N+1 nodes, an empty terminal and forward edges everywhere else."""
        for kana in sample_kana:
            dag = builder.build(kana)
            assert len(dag) == len(kana) + 1
            assert dag[-1] == ()
            for i, edges in enumerate(dag[:-1]):
                assert edges, f"node {i} of {kana!r} has no edges"
                assert all(edge.target > i for edge in edges)
            builder.validate(kana, dag)

    def test_dag_is_immutable(self, builder):
        """Test that nodes are tuples so cached DAGs cannot be altered."""
        dag = builder.build("かな")
        assert isinstance(dag, tuple)
        assert all(isinstance(edges, tuple) for edges in dag)


class TestTableEdges:
    """Edges taken straight from the mapping table."""

    def test_single_kana_keeps_table_order(self, builder):
        """Test that spellings appear most-preferred first."""
        dag = builder.build("し")
        assert spellings(dag[0]) == [(1, "shi"), (1, "si"), (1, "ci")]

    def test_one_and_two_character_units_coexist(self, builder):
        """Test that き and きゃ both contribute edges at the same node."""
        dag = builder.build("きゃ")
        assert spellings(dag[0]) == [(1, "ki"), (2, "kya")]
        assert spellings(dag[1]) == [(2, "xya"), (2, "lya")]

    def test_katakana_is_normalized(self, builder):
        """Test that katakana targets get the hiragana edges."""
        assert builder.build("カナ") == builder.build("かな")

    def test_full_width_letters_are_normalized(self, builder):
        """Test that full-width Latin letters pass through as half-width lowercase."""
        dag = builder.build("Ａｂ")
        assert spellings(dag[0]) == [(1, "a")]
        assert spellings(dag[1]) == [(2, "b")]


class TestGeminateEdges:
    """Small tsu doubling the next consonant."""

    def test_small_tsu_doubles_following_consonant(self, builder):
        """Test that っか offers kka and cca reaching past か."""
        dag = builder.build("っか")
        assert spellings(dag[0]) == [
            (1, "xtu"), (1, "ltu"), (1, "xtsu"), (1, "ltsu"),
            (2, "kka"), (2, "cca"),
        ]

    def test_trailing_small_tsu_has_only_table_spellings(self, builder):
        """Test that a final っ gets no doubled edges."""
        dag = builder.build("かっ")
        assert spellings(dag[1]) == [(2, "xtu"), (2, "ltu"), (2, "xtsu"), (2, "ltsu")]

    def test_vowel_is_not_doubled(self, builder):
        """Test that っあ offers no 'aa' edge."""
        dag = builder.build("っあ")
        assert all(edge.target == 1 for edge in dag[0])

    def test_nasal_n_is_not_doubled(self, builder):
        """Test that n is outside the doubling set."""
        assert "n" not in GEMINATE_CONSONANTS
        dag = builder.build("っな")
        assert all(edge.target == 1 for edge in dag[0])

    def test_consecutive_small_tsu_chain(self, builder):
        """Test that っっか doubles the already doubled edges of the next node."""
        dag = builder.build("っっか")
        assert (3, "kka") in spellings(dag[1])
        assert (3, "kkka") in spellings(dag[0])
        assert (2, "xxtu") in spellings(dag[0])


class TestNasalEdges:
    """The bare 'n' spelling of ん."""

    def test_final_nasal_accepts_n(self, builder):
        """Test that a final ん accepts n after its table spellings."""
        dag = builder.build("ん")
        assert spellings(dag[0]) == [(1, "nn"), (1, "xn"), (1, "n'"), (1, "n")]

    @pytest.mark.parametrize("follower", list("あいうえおぁぃぅぇぉゃゅょ"))
    def test_no_bare_n_before_ambiguous_kana(self, builder, follower):
        """Test that ん before a vowel or glide kana has no bare n."""
        dag = builder.build("ん" + follower)
        assert "n" not in [edge.spelling for edge in dag[0]]
        assert "nn" in [edge.spelling for edge in dag[0]]

    @pytest.mark.parametrize("follower", list("なかやぶ"))
    def test_bare_n_before_other_kana(self, builder, follower):
        """Test that ん before a consonant kana accepts n."""
        dag = builder.build("ん" + follower)
        assert (1, "n") in spellings(dag[0])


class TestFallbackEdges:
    """Characters outside the table."""

    def test_unknown_characters_pass_through(self, builder):
        """Test that unregistered characters become their own spelling."""
        dag = builder.build("漢x!")
        assert spellings(dag[0]) == [(1, "漢")]
        assert spellings(dag[1]) == [(2, "x")]
        assert spellings(dag[2]) == [(3, "!")]

    def test_injected_table_falls_back_for_missing_kana(self, fixture_table):
        """Test that a small table leaves unknown kana as pass-through edges."""
        builder = KanaDagBuilder(fixture_table)
        dag = builder.build("かめ")
        assert spellings(dag[0]) == [(1, "ka"), (1, "ca")]
        assert spellings(dag[1]) == [(2, "め")]


class TestCaching:
    """DAG memoization keyed on the normalized string."""

    def test_cache_returns_same_object(self, fixture_table):
        """Test that equivalent inputs share one cached DAG."""
        builder = KanaDagBuilder(fixture_table, cache_size=8)
        assert builder.build("かな") is builder.build("カナ")

    def test_cache_can_be_disabled(self, fixture_table):
        """Test that cache_size=0 rebuilds equal DAGs."""
        builder = KanaDagBuilder(fixture_table, cache_size=0)
        first = builder.build("かな")
        second = builder.build("かな")
        assert first == second
        assert first is not second


class TestValidate:
    """Invariant checks on hand-made DAGs."""

    def test_dead_end_is_reported(self, builder):
        """Test that a non-terminal node without edges is rejected."""
        with pytest.raises(DagInvariantError) as exc_info:
            builder.validate("かな", ((Edge(target=1, spelling="ka"),), (), ()))
        assert exc_info.value.index == 1

    def test_wrong_node_count_is_reported(self, builder):
        """Test that a DAG of the wrong size is rejected."""
        with pytest.raises(DagInvariantError):
            builder.validate("か", ((),))

    def test_backward_edge_is_reported(self, builder):
        """Test that an edge not moving forward is rejected."""
        dag = ((Edge(target=2, spelling="ka"),), (Edge(target=1, spelling="na"),), ())
        with pytest.raises(DagInvariantError):
            builder.validate("かな", dag)

    def test_terminal_with_edges_is_reported(self, builder):
        """Test that the terminal node must stay empty."""
        dag = ((Edge(target=1, spelling="ka"),), (Edge(target=1, spelling="ka"),))
        with pytest.raises(DagInvariantError):
            builder.validate("か", dag)
