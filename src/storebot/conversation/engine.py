"""
Per-session engine state.

A ChatEngine owns everything one chat session learns: the exemplar store,
the vocabulary index, the classifier engine and the published snapshot.
Writers stage changes on a copy of the store and publish it together with
the new snapshot under the write lock.
Readers only ever look at the snapshot, which pairs a vocabulary with the
model and exemplars it belongs to, so they never see a half-applied update.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

from storebot.conversation.classifier import ClassifierEngine, TrainedModel
from storebot.conversation.exemplars import Exemplar, ExemplarStore
from storebot.conversation.features import FeatureVectorizer
from storebot.conversation.vocabulary import Vocabulary, VocabularyIndex


@dataclass(frozen=True)
class EngineSnapshot:
    """
    Immutable view consumed by the resolver.

    Attributes:
        exemplars: Exemplars in insertion order
        vocabulary: Vocabulary rebuilt from ``exemplars``
        model: Model in effect (may have been trained on an earlier
            vocabulary, which it carries itself), or None
        generation: Number of retrains published so far
    """

    exemplars: Tuple[Exemplar, ...] = ()
    vocabulary: Vocabulary = field(default_factory=Vocabulary)
    model: Optional[TrainedModel] = None
    generation: int = 0
    _by_input: Dict[str, str] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def build(
        cls,
        exemplars: Tuple[Exemplar, ...],
        vocabulary: Vocabulary,
        model: Optional[TrainedModel],
        generation: int,
    ) -> "EngineSnapshot":
        return cls(
            exemplars=exemplars,
            vocabulary=vocabulary,
            model=model,
            generation=generation,
            _by_input={exemplar.input: exemplar.response for exemplar in exemplars},
        )

    def exact(self, normalized_input: str) -> Optional[str]:
        """Response stored for exactly this normalized input, if any."""
        return self._by_input.get(normalized_input)


class ChatEngine:
    """
    Owned, per-session engine state.

    Create one per chat session and hand it to a ResponseResolver and a
    TrainingCoordinator. Nothing here is shared between sessions.

    Attributes:
        _store: Exemplar store matching the published snapshot
        _vocabulary_index: Rebuilds the vocabulary on each retrain
        _vectorizer: Shared by training and resolution
        _classifier: Trains and holds the latest model
        _lock: Serializes writers
        _snapshot: Last published state
    """

    def __init__(
        self,
        classifier: Optional[ClassifierEngine] = None,
        vectorizer: Optional[FeatureVectorizer] = None,
    ):
        self._vectorizer = vectorizer or FeatureVectorizer()
        self._classifier = classifier or ClassifierEngine(self._vectorizer)
        self._store = ExemplarStore()
        self._vocabulary_index = VocabularyIndex()
        self._lock = threading.RLock()
        self._snapshot = EngineSnapshot()

    @property
    def store(self) -> ExemplarStore:
        return self._store

    @property
    def vocabulary_index(self) -> VocabularyIndex:
        return self._vocabulary_index

    @property
    def vectorizer(self) -> FeatureVectorizer:
        return self._vectorizer

    @property
    def classifier(self) -> ClassifierEngine:
        return self._classifier

    @property
    def snapshot(self) -> EngineSnapshot:
        """Current published state. Safe to read without the lock."""
        return self._snapshot

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold exclusive write access for a mutate-retrain-publish cycle."""
        with self._lock:
            yield

    def publish(self, snapshot: EngineSnapshot, store: Optional[ExemplarStore] = None) -> None:
        """
        Swap in a new snapshot, and the staged store it was built from.

        Caller must hold ``write_lock``.
        """
        if store is not None:
            self._store = store
        self._snapshot = snapshot

    def __repr__(self) -> str:
        snap = self._snapshot
        return (
            f"ChatEngine(exemplars={len(snap.exemplars)}, "
            f"vocabulary={len(snap.vocabulary)}, model={snap.model is not None})"
        )
