"""
Vocabulary index: token → feature position for one build cycle.

The index is rebuilt from scratch whenever the exemplar set changes, so a
token's position is only meaningful alongside the Vocabulary it came from.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from storebot.conversation.exemplars import Exemplar
from storebot.conversation.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vocabulary:
    """
    Immutable token → index mapping produced by one rebuild.

    Attributes:
        index: Token to feature position
        tokens: Tokens in position order (tokens[i] has index i)
    """

    index: Dict[str, int] = field(default_factory=dict)
    tokens: Tuple[str, ...] = ()

    def get(self, token: str) -> Optional[int]:
        """Return the position of a token, or None if unknown."""
        return self.index.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self.index

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self.tokens)})"


class VocabularyIndex:
    """
    Build vocabularies from exemplar inputs.

    Tokens are numbered in first-seen order while walking exemplars in store
    order, so the result is fully determined by the exemplar sequence.

    Example:
        >>> index = VocabularyIndex()
        >>> vocab = index.rebuild([Exemplar("hello there", "Hi!")])
        >>> vocab.tokens
        ('hello', 'there')
    """

    def __init__(self):
        """Initialize with an empty vocabulary."""
        self._current = Vocabulary()

    @property
    def current(self) -> Vocabulary:
        """The vocabulary produced by the most recent rebuild."""
        return self._current

    def rebuild(self, exemplars: Iterable[Exemplar]) -> Vocabulary:
        """
        Discard the current vocabulary and build a new one.

        Args:
            exemplars: Exemplars in store order

        Returns:
            The freshly built Vocabulary (also kept as ``current``)
        """
        self.clear()

        index: Dict[str, int] = {}
        for exemplar in exemplars:
            for token in tokenize(exemplar.input):
                if token not in index:
                    index[token] = len(index)

        self._current = Vocabulary(index=index, tokens=tuple(index))
        logger.debug(f"Rebuilt vocabulary with {len(index)} tokens")
        return self._current

    def clear(self) -> None:
        """Reset to an empty vocabulary."""
        self._current = Vocabulary()

    def __len__(self) -> int:
        return len(self._current)

    def __repr__(self) -> str:
        return f"VocabularyIndex(size={len(self._current)})"
