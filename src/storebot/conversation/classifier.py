"""
Classifier engine: train response classifiers over vectorized exemplars.

Each training pass turns the exemplar set into a count matrix against a
freshly built vocabulary, fits an ensemble classifier and bundles it with
the label → response map into an immutable TrainedModel.

Training is skipped when fewer than two distinct responses exist. When the
trainer fails, the failure is logged and the previous model is kept.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import numpy as np

from storebot.config.constants import (
    DEFAULT_MAX_FEATURES,
    DEFAULT_N_ESTIMATORS,
    DEFAULT_RANDOM_STATE,
    MIN_DISTINCT_LABELS,
)
from storebot.conversation.exemplars import Exemplar
from storebot.conversation.features import FeatureVectorizer
from storebot.conversation.forest import VotingForest
from storebot.conversation.labels import ResponseRegistry, first_seen_labels
from storebot.conversation.vocabulary import Vocabulary
from storebot.errors import TrainingError
from storebot.protocols.classifier import EnsembleClassifier

logger = logging.getLogger(__name__)

ClassifierFactory = Callable[[], EnsembleClassifier]


@dataclass(frozen=True)
class TrainedModel:
    """
    Result of one successful training pass.

    Attributes:
        classifier: Fitted ensemble
        responses: Label id → response text for every label in training
        vocabulary: Vocabulary the classifier's features are laid out on
        exemplar_count: Number of exemplars trained on
    """

    classifier: EnsembleClassifier
    responses: Dict[int, str]
    vocabulary: Vocabulary
    exemplar_count: int

    def predict(self, features: np.ndarray) -> int:
        """Predict a label id for a vector laid out on ``vocabulary``."""
        return self.classifier.predict(features)

    def response_for(self, label: int) -> Optional[str]:
        return self.responses.get(label)

    def __repr__(self) -> str:
        return (
            f"TrainedModel(labels={len(self.responses)}, "
            f"features={len(self.vocabulary)}, exemplars={self.exemplar_count})"
        )


def default_classifier_factory(
    n_estimators: int = DEFAULT_N_ESTIMATORS,
    max_features: float = DEFAULT_MAX_FEATURES,
    random_state: int = DEFAULT_RANDOM_STATE,
) -> ClassifierFactory:
    """Build a factory producing identically configured VotingForests."""

    def factory() -> EnsembleClassifier:
        return VotingForest(
            n_estimators=n_estimators,
            max_features=max_features,
            random_state=random_state,
        )

    return factory


class ClassifierEngine:
    """
    Train and query the response classifier.

    The engine owns the most recent TrainedModel. A new model replaces it
    only when training succeeds; a skipped pass (single response) clears it.

    Attributes:
        _vectorizer: Turns exemplar inputs into count vectors
        _factory: Produces a fresh, untrained classifier per pass
        _registry: Stable label ids, or None for per-pass numbering
        _model: Latest usable model

    Example:
        >>> engine = ClassifierEngine(FeatureVectorizer())
        >>> model = engine.train(store.snapshot(), vocabulary)
        >>> engine.predict(vectorizer.vectorize("hello", model.vocabulary))
        0
    """

    def __init__(
        self,
        vectorizer: FeatureVectorizer,
        classifier_factory: Optional[ClassifierFactory] = None,
        registry: Optional[ResponseRegistry] = None,
        stable_labels: bool = True,
    ):
        """
        Initialize the engine.

        Args:
            vectorizer: Feature vectorizer shared with the resolver
            classifier_factory: Callable returning an untrained classifier
                (defaults to a 25-tree VotingForest)
            registry: Registry to draw label ids from; created when
                stable_labels is True and none is given
            stable_labels: Use registry ids instead of per-pass numbering
        """
        self._vectorizer = vectorizer
        self._factory = classifier_factory or default_classifier_factory()
        if registry is None and stable_labels:
            registry = ResponseRegistry()
        self._registry = registry if stable_labels else None
        self._model: Optional[TrainedModel] = None
        self._failures = 0

    @property
    def model(self) -> Optional[TrainedModel]:
        return self._model

    @property
    def failures(self) -> int:
        """Number of training passes that failed and were discarded."""
        return self._failures

    def train(
        self, exemplars: Sequence[Exemplar], vocabulary: Vocabulary
    ) -> Optional[TrainedModel]:
        """
        Retrain over the full exemplar set.

        Args:
            exemplars: Exemplars in store order
            vocabulary: Vocabulary freshly rebuilt from the same exemplars

        Returns:
            The model now in effect: the new one, the previous one if
            training failed, or None if training was skipped
        """
        labels = self._label_map(exemplars)

        if len(labels) < MIN_DISTINCT_LABELS:
            logger.debug(
                f"Skipping training: {len(labels)} distinct response(s), "
                f"need {MIN_DISTINCT_LABELS}"
            )
            self._model = None
            return None

        try:
            self._model = self._fit(exemplars, vocabulary, labels)
        except TrainingError as e:
            self._failures += 1
            logger.warning(f"Training failed, keeping previous model: {e}")
            return self._model

        logger.info(
            f"Trained classifier on {len(exemplars)} exemplars, "
            f"{len(labels)} labels, {len(vocabulary)} features"
        )
        return self._model

    def predict(self, features: np.ndarray) -> Optional[int]:
        """Predict with the current model; None if no model is trained."""
        if self._model is None:
            return None
        return self._model.predict(features)

    def _label_map(self, exemplars: Sequence[Exemplar]) -> Dict[str, int]:
        """Distinct responses → label ids, in first-seen order."""
        if self._registry is None:
            return first_seen_labels(exemplars)

        labels: Dict[str, int] = {}
        for exemplar in exemplars:
            if exemplar.response not in labels:
                labels[exemplar.response] = self._registry.label_for(exemplar.response)
        return labels

    def _fit(
        self,
        exemplars: Sequence[Exemplar],
        vocabulary: Vocabulary,
        labels: Dict[str, int],
    ) -> TrainedModel:
        """Vectorize, fit and bundle. Raises TrainingError on failure."""
        X = self._vectorizer.vectorize_many(
            [exemplar.input for exemplar in exemplars], vocabulary
        )
        y = np.array([labels[exemplar.response] for exemplar in exemplars])

        if X.shape[1] == 0 or not X.any():
            raise TrainingError(
                f"Degenerate feature matrix {X.shape}: no token occurs in any exemplar"
            )

        classifier = self._factory()
        try:
            classifier.train(X, y)
        except TrainingError:
            raise
        except Exception as e:
            raise TrainingError(f"Classifier failed on training data: {e!r}") from e

        return TrainedModel(
            classifier=classifier,
            responses={label: response for response, label in labels.items()},
            vocabulary=vocabulary,
            exemplar_count=len(exemplars),
        )

    def __repr__(self) -> str:
        return f"ClassifierEngine(model={self._model!r}, failures={self._failures})"
