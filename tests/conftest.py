"""
Shared fixtures for storebot tests.

Provides deterministic stand-in classifiers so resolver and trainer tests
do not depend on how a random forest happens to split tiny datasets.
"""

import random

import numpy as np
import pytest

from storebot.conversation.classifier import ClassifierEngine
from storebot.conversation.engine import ChatEngine
from storebot.conversation.features import FeatureVectorizer
from storebot.conversation.resolver import ResponseResolver
from storebot.conversation.session import ChatSession
from storebot.conversation.trainer import TrainingCoordinator


# =============================================================================
# Stand-in classifiers
# =============================================================================

class NearestRowClassifier:
    """Predicts the label of the training row with the largest overlap."""

    def __init__(self):
        self.X = None
        self.y = None

    def train(self, X, y):
        if X.shape[1] == 0:
            raise ValueError("Found array with 0 feature(s)")
        self.X = X
        self.y = y

    def predict(self, x):
        scores = self.X @ np.asarray(x)
        return int(self.y[int(np.argmax(scores))])


class FailingClassifier:
    """Rejects every training set."""

    def train(self, X, y):
        raise ValueError("cannot fit")

    def predict(self, x):
        raise AssertionError("never trained")


class CrashingClassifier:
    """Dies with a non-ValueError inside train."""

    def train(self, X, y):
        raise RuntimeError("trainer crashed")

    def predict(self, x):
        raise AssertionError("never trained")


class FixedLabelClassifier:
    """Always predicts the same label id."""

    def __init__(self, label):
        self.label = label

    def train(self, X, y):
        pass

    def predict(self, x):
        return self.label


class ExplodingClassifier:
    """Trains fine, fails at prediction time."""

    def train(self, X, y):
        pass

    def predict(self, x):
        raise RuntimeError("prediction blew up")


class FailAfterFirstFactory:
    """Factory whose classifiers fit once, then fail every later pass."""

    def __init__(self, failure=FailingClassifier):
        self.failure = failure
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls == 1:
            return NearestRowClassifier()
        return self.failure()


# =============================================================================
# Factory fixtures
# =============================================================================

@pytest.fixture
def nearest_factory():
    """Factory producing NearestRowClassifiers."""
    return NearestRowClassifier


@pytest.fixture
def failing_factory():
    """Factory producing classifiers that never fit."""
    return FailingClassifier


@pytest.fixture
def fail_after_first_factory():
    """Factory that succeeds once then fails."""
    return FailAfterFirstFactory()


@pytest.fixture
def crash_after_first_factory():
    """Factory that succeeds once then raises RuntimeError while training."""
    return FailAfterFirstFactory(failure=CrashingClassifier)


# =============================================================================
# Engine fixtures
# =============================================================================

@pytest.fixture
def vectorizer():
    return FeatureVectorizer()


@pytest.fixture
def engine(vectorizer, nearest_factory):
    """Empty ChatEngine using the nearest-row classifier."""
    classifier = ClassifierEngine(vectorizer, classifier_factory=nearest_factory)
    return ChatEngine(classifier=classifier, vectorizer=vectorizer)


@pytest.fixture
def coordinator(engine):
    return TrainingCoordinator(engine)


@pytest.fixture
def resolver(engine):
    return ResponseResolver(engine, rng=random.Random(0))


@pytest.fixture
def greeting_seed():
    """Two-response seed."""
    return {"hello": "Hi there!", "bye": "Goodbye!"}


@pytest.fixture
def session(greeting_seed):
    """Session over the real forest with a two-response seed."""
    return ChatSession(greeting_seed, rng=random.Random(0))


@pytest.fixture
def fixed_label_factory():
    """Build a factory whose classifiers always predict ``label``."""
    def make(label):
        return lambda: FixedLabelClassifier(label)
    return make


@pytest.fixture
def exploding_factory():
    """Factory producing classifiers that fail at prediction time."""
    return ExplodingClassifier


@pytest.fixture
def build_resolver(vectorizer):
    """Seed a fresh engine with a given classifier factory and wrap a resolver."""
    def build(seed, factory, rng_seed=0):
        classifier = ClassifierEngine(vectorizer, classifier_factory=factory)
        engine = ChatEngine(classifier=classifier, vectorizer=vectorizer)
        TrainingCoordinator(engine).seed(seed)
        return ResponseResolver(engine, rng=random.Random(rng_seed))
    return build
