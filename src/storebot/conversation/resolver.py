"""
Response resolution: map an utterance to a canned response.

Tiers are consulted in order and the first one that produces a response
wins:

1. exact      - the normalized query is a stored input
2. classifier - the trained model predicts a known response
3. substring  - a stored input occurs inside the query (first in store order)
4. fallback   - a random pick from the fallback pool

Resolution never raises; the fallback tier always answers.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from storebot.config.constants import (
    TIER_CLASSIFIER,
    TIER_EXACT,
    TIER_FALLBACK,
    TIER_SUBSTRING,
)
from storebot.conversation.engine import ChatEngine, EngineSnapshot
from storebot.conversation.seed import FALLBACK_RESPONSES
from storebot.conversation.tokenizer import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """A resolved response and the tier that produced it."""

    response: str
    tier: str
    label: Optional[int] = None

    def __repr__(self) -> str:
        return f"Resolution({self.tier}, {self.response[:30]!r})"


class ResponseResolver:
    """
    Resolve user text against a ChatEngine's published snapshot.

    Attributes:
        _engine: Engine whose snapshot is read on every call
        _fallbacks: Non-empty pool for the last tier
        _rng: Random source for fallback picks

    Example:
        >>> resolver = ResponseResolver(engine)
        >>> resolver.resolve("HELLO")
        'Hi there! How can I help you today?'
        >>> resolver.explain("gaming laptop").tier  # "laptop" is a known token
        'classifier'
        >>> resolver.explain("xyz123").tier  # no known tokens, no substring
        'fallback'
    """

    def __init__(
        self,
        engine: ChatEngine,
        fallback_responses: Sequence[str] = FALLBACK_RESPONSES,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize resolver.

        Args:
            engine: Session engine to read from
            fallback_responses: Generic replies for unmatched input
            rng: Random source; a fresh unseeded Random if omitted

        Raises:
            ValueError: If fallback_responses is empty
        """
        if not fallback_responses:
            raise ValueError("fallback_responses must not be empty")
        self._engine = engine
        self._fallbacks = tuple(fallback_responses)
        self._rng = rng or random.Random()

    @property
    def fallback_responses(self) -> Sequence[str]:
        return self._fallbacks

    def resolve(self, text: str) -> str:
        """Return the best response for ``text``. Never raises."""
        return self.explain(text).response

    def explain(self, text: str) -> Resolution:
        """Resolve ``text`` and report which tier answered."""
        query = normalize(text or "")
        snapshot = self._engine.snapshot

        resolution = (
            self._exact(query, snapshot)
            or self._classify(query, snapshot)
            or self._substring(query, snapshot)
            or self._fallback()
        )
        logger.debug(f"Resolved {query!r} via {resolution.tier}")
        return resolution

    def _exact(self, query: str, snapshot: EngineSnapshot) -> Optional[Resolution]:
        response = snapshot.exact(query)
        if response is None:
            return None
        return Resolution(response=response, tier=TIER_EXACT)

    def _classify(self, query: str, snapshot: EngineSnapshot) -> Optional[Resolution]:
        model = snapshot.model
        if model is None:
            return None

        # The model is paired with the vocabulary it was trained on
        features = self._engine.vectorizer.vectorize(query, model.vocabulary)
        if not features.any():
            # Nothing in the query is known to the model
            return None

        try:
            label = model.predict(features)
        except Exception as e:
            logger.warning(f"Classifier prediction failed: {e}", exc_info=True)
            return None

        response = model.response_for(label)
        if response is None:
            return None
        return Resolution(response=response, tier=TIER_CLASSIFIER, label=label)

    def _substring(self, query: str, snapshot: EngineSnapshot) -> Optional[Resolution]:
        for exemplar in snapshot.exemplars:
            if exemplar.input in query:
                return Resolution(response=exemplar.response, tier=TIER_SUBSTRING)
        return None

    def _fallback(self) -> Resolution:
        return Resolution(response=self._rng.choice(self._fallbacks), tier=TIER_FALLBACK)

    def __repr__(self) -> str:
        return f"ResponseResolver(fallbacks={len(self._fallbacks)})"
