"""
Training coordinator: accept new exemplars and retrain synchronously.

Every accepted exemplar triggers a full rebuild: vocabulary first, then the
classifier. Changes are staged on a copy of the store; the copy, vocabulary,
model and exemplar tuple are published together before ``add_exemplar``
returns. If the rebuild raises, nothing is published and the engine keeps
its previous store and snapshot.
"""

import logging
from typing import Mapping

from storebot.conversation.engine import ChatEngine, EngineSnapshot
from storebot.conversation.exemplars import Exemplar, ExemplarStore, make_exemplar

logger = logging.getLogger(__name__)


class TrainingCoordinator:
    """
    Apply training input to a ChatEngine.

    Example:
        >>> coordinator = TrainingCoordinator(engine)
        >>> _ = coordinator.add_exemplar("Do you ship abroad?", "Yes, to 40 countries.")
        >>> engine.snapshot.exact("do you ship abroad?")
        'Yes, to 40 countries.'
    """

    def __init__(self, engine: ChatEngine):
        self._engine = engine

    def add_exemplar(self, input_text: str, response_text: str) -> Exemplar:
        """
        Store a training pair and retrain.

        An existing exemplar with the same normalized input has its
        response overwritten in place.

        Args:
            input_text: User utterance to teach
            response_text: Response to give for it

        Returns:
            The stored exemplar

        Raises:
            ValidationError: If either string is empty after trimming
        """
        exemplar = make_exemplar(input_text, response_text)

        with self._engine.write_lock():
            staged = self._engine.store.copy()
            is_new = staged.put(exemplar)
            logger.debug(
                f"{'Added' if is_new else 'Overwrote'} exemplar {exemplar.input!r}"
            )
            self._retrain(staged)

        return exemplar

    def seed(self, responses: Mapping[str, str]) -> int:
        """
        Bulk-load exemplars and retrain once.

        Every pair is validated before any is stored.

        Returns:
            Number of exemplars in the store afterwards

        Raises:
            ValidationError: If any pair is invalid (nothing is stored)
        """
        exemplars = [
            make_exemplar(input_text, response_text)
            for input_text, response_text in responses.items()
        ]

        with self._engine.write_lock():
            staged = self._engine.store.copy()
            for exemplar in exemplars:
                staged.put(exemplar)
            self._retrain(staged)
            return len(staged)

    def retrain(self) -> EngineSnapshot:
        """Rebuild and republish from the current store."""
        with self._engine.write_lock():
            return self._retrain(self._engine.store)

    def _retrain(self, store: ExemplarStore) -> EngineSnapshot:
        engine = self._engine
        exemplars = store.snapshot()
        vocabulary = engine.vocabulary_index.rebuild(exemplars)
        model = engine.classifier.train(exemplars, vocabulary)

        snapshot = EngineSnapshot.build(
            exemplars=exemplars,
            vocabulary=vocabulary,
            model=model,
            generation=engine.snapshot.generation + 1,
        )
        engine.publish(snapshot, store=store)
        return snapshot

    def __repr__(self) -> str:
        return f"TrainingCoordinator(engine={self._engine!r})"
