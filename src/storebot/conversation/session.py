"""
Chat session: the engine surface the storefront UI talks to.

A ChatSession owns one ChatEngine and wires a ResponseResolver and a
TrainingCoordinator to it. The UI only needs ``resolve`` and
``add_exemplar``.
"""

import random
from typing import Dict, Mapping, Optional, Sequence

from storebot.conversation.classifier import ClassifierEngine, ClassifierFactory
from storebot.conversation.engine import ChatEngine
from storebot.conversation.exemplars import Exemplar
from storebot.conversation.features import FeatureVectorizer
from storebot.conversation.resolver import Resolution, ResponseResolver
from storebot.conversation.seed import DEFAULT_RESPONSES, FALLBACK_RESPONSES
from storebot.conversation.trainer import TrainingCoordinator


class ChatSession:
    """
    One user's trainable chat engine.

    Example:
        >>> session = ChatSession({"hello": "Hi there!", "bye": "Goodbye!"})
        >>> session.resolve("HELLO")
        'Hi there!'
        >>> _ = session.add_exemplar("Opening hours?", "We open at 9am.")
        >>> session.resolve("opening hours?")
        'We open at 9am.'
    """

    def __init__(
        self,
        seed: Optional[Mapping[str, str]] = None,
        fallback_responses: Sequence[str] = FALLBACK_RESPONSES,
        classifier_factory: Optional[ClassifierFactory] = None,
        stable_labels: bool = True,
        rng: Optional[random.Random] = None,
    ):
        """
        Build and train a session.

        Args:
            seed: Initial input → response pairs (storefront defaults if None)
            fallback_responses: Pool for unmatched input
            classifier_factory: Produces untrained classifiers per retrain
            stable_labels: Keep label ids stable across retrains
            rng: Random source for fallback picks

        Raises:
            ValidationError: If a seed pair has an empty input or response
        """
        vectorizer = FeatureVectorizer()
        classifier = ClassifierEngine(
            vectorizer,
            classifier_factory=classifier_factory,
            stable_labels=stable_labels,
        )
        self._engine = ChatEngine(classifier=classifier, vectorizer=vectorizer)
        self._resolver = ResponseResolver(self._engine, fallback_responses, rng=rng)
        self._coordinator = TrainingCoordinator(self._engine)

        self._coordinator.seed(DEFAULT_RESPONSES if seed is None else seed)

    @property
    def engine(self) -> ChatEngine:
        return self._engine

    @property
    def resolver(self) -> ResponseResolver:
        return self._resolver

    @property
    def coordinator(self) -> TrainingCoordinator:
        return self._coordinator

    def resolve(self, text: str) -> str:
        """Respond to user text. Never raises."""
        return self._resolver.resolve(text)

    def explain(self, text: str) -> Resolution:
        """Respond and report the tier that answered."""
        return self._resolver.explain(text)

    def add_exemplar(self, input_text: str, response_text: str) -> Exemplar:
        """Teach a response and retrain. Raises ValidationError on empty input."""
        return self._coordinator.add_exemplar(input_text, response_text)

    def get_stats(self) -> Dict[str, object]:
        """Get engine statistics."""
        snapshot = self._engine.snapshot
        model = snapshot.model
        return {
            "exemplars": len(snapshot.exemplars),
            "vocabulary_size": len(snapshot.vocabulary),
            "labels": len(model.responses) if model else 0,
            "model_ready": model is not None,
            "retrains": snapshot.generation,
            "training_failures": self._engine.classifier.failures,
        }

    def __repr__(self) -> str:
        return f"ChatSession({self._engine!r})"
