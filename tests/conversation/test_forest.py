"""Tests for VotingForest."""

import numpy as np
import pytest
from sklearn.tree import DecisionTreeClassifier

from storebot.conversation.forest import VotingForest


@pytest.fixture
def separable():
    """Three classes, four identical rows each, one distinct feature per class."""
    rows = [[3, 0, 0]] * 4 + [[0, 3, 0]] * 4 + [[0, 0, 3]] * 4
    labels = [0] * 4 + [1] * 4 + [2] * 4
    return np.array(rows), np.array(labels)


class TestVotingForest:
    """Test training and hard-vote prediction."""

    def test_predicts_training_classes(self, separable):
        X, y = separable
        forest = VotingForest(n_estimators=25, max_features=0.8, random_state=42)
        forest.train(X, y)

        assert forest.predict(np.array([3, 0, 0])) == 0
        assert forest.predict(np.array([0, 3, 0])) == 1
        assert forest.predict(np.array([0, 0, 3])) == 2

    def test_votes_sum_to_tree_count(self, separable):
        X, y = separable
        forest = VotingForest(n_estimators=11)
        forest.train(X, y)

        votes = forest.votes(X[0])
        assert votes.sum() == 11
        assert len(votes) == 3

    def test_deterministic_for_fixed_seed(self, separable):
        X, y = separable
        first = VotingForest(random_state=7)
        second = VotingForest(random_state=7)
        first.train(X, y)
        second.train(X, y)

        probe = np.array([1, 1, 1])
        assert first.votes(probe).tolist() == second.votes(probe).tolist()

    def test_predict_returns_original_label_ids(self):
        """Test non-contiguous label ids come back as given."""
        X = np.array([[2, 0]] * 4 + [[0, 2]] * 4)
        y = np.array([7] * 4 + [3] * 4)
        forest = VotingForest()
        forest.train(X, y)

        assert forest.predict(np.array([2, 0])) == 7
        assert forest.predict(np.array([0, 2])) == 3

    def test_tie_goes_to_lowest_label(self):
        """Test two real trees voting for different labels resolve to the lower id."""
        X = np.array([[1, 0], [0, 1]])
        y = np.array([5, 3])
        forest = VotingForest(n_estimators=2)
        forest.train(X, y)

        # Trees fit on class positions: 0 -> label 3, 1 -> label 5
        splits_on_first = DecisionTreeClassifier().fit(
            np.array([[1, 0], [0, 0]]), np.array([0.0, 1.0])
        )
        splits_on_second = DecisionTreeClassifier().fit(
            np.array([[0, 0], [0, 1]]), np.array([0.0, 1.0])
        )
        probe = np.array([1, 1])
        assert splits_on_first.predict(probe.reshape(1, -1))[0] == 0
        assert splits_on_second.predict(probe.reshape(1, -1))[0] == 1

        for trees in ([splits_on_first, splits_on_second], [splits_on_second, splits_on_first]):
            forest._forest.estimators_ = trees
            assert forest.votes(probe).tolist() == [1, 1]
            assert forest.predict(probe) == 3

    def test_identical_rows_with_even_tree_count(self):
        """Test conflicting identical rows never produce the higher label on a tie."""
        X = np.array([[1, 1], [1, 1]])
        y = np.array([4, 2])
        forest = VotingForest(n_estimators=2, bootstrap=False)
        forest.train(X, y)

        assert forest.votes(X[0]).tolist() == [2, 0]
        assert forest.predict(X[0]) == 2

    def test_predict_before_train(self):
        with pytest.raises(RuntimeError):
            VotingForest().predict(np.array([1]))

    def test_zero_feature_matrix_rejected(self):
        """Test scikit-learn's ValueError surfaces for an empty feature space."""
        forest = VotingForest()
        with pytest.raises(ValueError):
            forest.train(np.zeros((2, 0)), np.array([0, 1]))
