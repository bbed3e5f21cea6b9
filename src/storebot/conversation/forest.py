"""
Bagged decision-tree ensemble with hard majority voting.

Wraps scikit-learn's RandomForestClassifier for fitting. Prediction counts
one vote per tree instead of averaging probabilities, so ties are resolved
deterministically in favour of the lowest label id.
"""

import numpy as np
from sklearn.ensemble import RandomForestClassifier

from storebot.config.constants import (
    DEFAULT_BOOTSTRAP,
    DEFAULT_MAX_FEATURES,
    DEFAULT_N_ESTIMATORS,
    DEFAULT_RANDOM_STATE,
)


class VotingForest:
    """
    Random forest satisfying the EnsembleClassifier protocol.

    Example:
        >>> forest = VotingForest(n_estimators=25, max_features=0.8, random_state=42)
        >>> forest.train(X, y)
        >>> forest.predict(X[0])
        0
    """

    def __init__(
        self,
        n_estimators: int = DEFAULT_N_ESTIMATORS,
        max_features: float = DEFAULT_MAX_FEATURES,
        random_state: int = DEFAULT_RANDOM_STATE,
        bootstrap: bool = DEFAULT_BOOTSTRAP,
    ):
        """
        Args:
            n_estimators: Number of trees
            max_features: Fraction of features considered at each split
            random_state: Seed for bootstrap sampling and feature subsampling
            bootstrap: Sample rows with replacement per tree
        """
        self._forest = RandomForestClassifier(
            n_estimators=n_estimators,
            max_features=max_features,
            bootstrap=bootstrap,
            random_state=random_state,
        )
        self._trained = False

    @property
    def n_estimators(self) -> int:
        return self._forest.n_estimators

    @property
    def classes(self) -> np.ndarray:
        """Label ids seen in training, ascending."""
        return self._forest.classes_

    def train(self, X: np.ndarray, y: np.ndarray) -> None:
        """Fit the forest. scikit-learn raises ValueError on unusable input."""
        self._forest.fit(X, y)
        self._trained = True

    def votes(self, x: np.ndarray) -> np.ndarray:
        """
        Per-class vote counts for one feature vector.

        Returns:
            Array aligned with ``classes``; entry i is the number of trees
            predicting ``classes[i]``
        """
        if not self._trained:
            raise RuntimeError("VotingForest.predict called before train")

        row = np.asarray(x).reshape(1, -1)
        n_classes = len(self._forest.classes_)
        # Sub-trees are fit on class positions, not on the original label ids
        positions = [int(tree.predict(row)[0]) for tree in self._forest.estimators_]
        return np.bincount(positions, minlength=n_classes)

    def predict(self, x: np.ndarray) -> int:
        """Label id with the most tree votes; lowest id wins ties."""
        counts = self.votes(x)
        return int(self._forest.classes_[int(np.argmax(counts))])

    def __repr__(self) -> str:
        state = "trained" if self._trained else "untrained"
        return f"VotingForest(trees={self.n_estimators}, {state})"
