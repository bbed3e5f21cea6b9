"""
EnsembleClassifier Protocol: Abstract interface for the response classifier.

Defines the contract the ClassifierEngine trains and queries. Any model that
maps count vectors to integer labels satisfies it: a random forest, naive
Bayes, or a logistic baseline. What callers rely on is determinism under a
fixed seed, not the specific algorithm.
"""

from typing import Protocol

import numpy as np


class EnsembleClassifier(Protocol):
    """
    Abstract protocol for a trainable label classifier.

    Implementations must:
    1. Accept a 2-D non-negative count matrix and a parallel label vector
    2. Predict exactly one label id for a single feature vector
    3. Be deterministic for a fixed seed and training set
    """

    def train(self, X: np.ndarray, y: np.ndarray) -> None:
        """
        Fit the classifier.

        Args:
            X: Feature matrix of shape (n_samples, n_features)
            y: Integer label vector of shape (n_samples,)

        Raises:
            ValueError: If the trainer rejects the matrix
        """
        ...

    def predict(self, x: np.ndarray) -> int:
        """
        Predict the label for one feature vector.

        Args:
            x: Feature vector of shape (n_features,)

        Returns:
            Predicted label id (one of the ids seen in training)
        """
        ...
