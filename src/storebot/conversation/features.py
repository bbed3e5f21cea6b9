"""
Bag-of-words feature vectors over a Vocabulary.

Counting is done by scikit-learn's CountVectorizer with the vocabulary fixed
up front, so feature positions follow the VocabularyIndex numbering rather
than CountVectorizer's own alphabetical ordering.
"""

from typing import Optional, Sequence, Tuple

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer

from storebot.conversation.tokenizer import tokenize
from storebot.conversation.vocabulary import Vocabulary


class FeatureVectorizer:
    """
    Convert text into token-count vectors.

    Vectors have one position per vocabulary token and hold occurrence
    counts, not presence flags. Tokens outside the vocabulary are ignored,
    which means a query made only of unseen words maps to the zero vector.

    Example:
        >>> vectorizer = FeatureVectorizer()
        >>> vectorizer.vectorize("hi hi there", vocab)  # vocab: hi=0, there=1
        array([2, 1])
    """

    dtype = np.int64

    def __init__(self):
        # Last vocabulary seen and the CountVectorizer bound to it
        self._cached: Optional[Tuple[Vocabulary, CountVectorizer]] = None

    def vectorize(self, text: str, vocabulary: Vocabulary) -> np.ndarray:
        """
        Vectorize a single text.

        Args:
            text: Raw or normalized text
            vocabulary: Vocabulary defining the feature positions

        Returns:
            1-D array of length ``len(vocabulary)``
        """
        return self.vectorize_many([text], vocabulary)[0]

    def vectorize_many(
        self, texts: Sequence[str], vocabulary: Vocabulary
    ) -> np.ndarray:
        """
        Vectorize texts into a matrix of shape (len(texts), len(vocabulary)).
        """
        if len(vocabulary) == 0:
            # CountVectorizer refuses an empty fixed vocabulary
            return np.zeros((len(texts), 0), dtype=self.dtype)
        counts = self._counter(vocabulary).transform(list(texts))
        return counts.toarray()

    def _counter(self, vocabulary: Vocabulary) -> CountVectorizer:
        cached = self._cached
        if cached is not None and cached[0] is vocabulary:
            return cached[1]

        counter = CountVectorizer(
            vocabulary=vocabulary.index,
            tokenizer=tokenize,
            lowercase=False,
            token_pattern=None,
            dtype=self.dtype,
        )
        self._cached = (vocabulary, counter)
        return counter
