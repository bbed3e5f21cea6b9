"""Tests for VocabularyIndex and Vocabulary."""

from storebot.conversation.exemplars import Exemplar
from storebot.conversation.tokenizer import tokenize
from storebot.conversation.vocabulary import Vocabulary, VocabularyIndex


def exemplars(*inputs):
    return [Exemplar(input=text, response="r") for text in inputs]


class TestVocabularyIndex:
    """Test vocabulary rebuilds."""

    def test_first_seen_numbering(self):
        """Test tokens are numbered in store order, first occurrence only."""
        vocab = VocabularyIndex().rebuild(exemplars("hello there", "there you go"))

        assert vocab.tokens == ("hello", "there", "you", "go")
        assert vocab.get("hello") == 0
        assert vocab.get("go") == 3

    def test_size_equals_distinct_tokens(self):
        """Test vocabulary size matches distinct tokens across inputs."""
        inputs = ("how are you", "are you open", "return policy", "how much")
        vocab = VocabularyIndex().rebuild(exemplars(*inputs))

        distinct = {token for text in inputs for token in tokenize(text)}
        assert len(vocab) == len(distinct)

    def test_rebuild_discards_previous(self):
        """Test a rebuild does not carry tokens from the last build."""
        index = VocabularyIndex()
        index.rebuild(exemplars("laptop", "phone"))
        vocab = index.rebuild(exemplars("warranty"))

        assert vocab.tokens == ("warranty",)
        assert "laptop" not in vocab
        assert index.current is vocab

    def test_deterministic(self):
        """Test identical exemplar sequences give identical vocabularies."""
        data = exemplars("b a", "c a", "d")
        assert VocabularyIndex().rebuild(data) == VocabularyIndex().rebuild(data)

    def test_order_matters(self):
        """Test reordering exemplars renumbers tokens."""
        first = VocabularyIndex().rebuild(exemplars("alpha", "beta"))
        second = VocabularyIndex().rebuild(exemplars("beta", "alpha"))

        assert first.get("alpha") == 0
        assert second.get("alpha") == 1

    def test_empty(self):
        """Test no exemplars (or no tokens) gives an empty vocabulary."""
        assert len(VocabularyIndex().rebuild([])) == 0
        assert len(VocabularyIndex().rebuild(exemplars("???"))) == 0

    def test_clear(self):
        index = VocabularyIndex()
        index.rebuild(exemplars("a b"))
        index.clear()
        assert len(index) == 0


class TestVocabulary:
    """Test the immutable vocabulary value."""

    def test_unknown_token(self):
        vocab = Vocabulary(index={"hi": 0}, tokens=("hi",))
        assert vocab.get("bye") is None
        assert "bye" not in vocab
        assert "hi" in vocab

    def test_default_is_empty(self):
        assert len(Vocabulary()) == 0
