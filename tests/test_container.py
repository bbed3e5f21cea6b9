"""Tests for StorebotContainer."""

from storebot.config.settings import Settings
from storebot.container import StorebotContainer
from storebot.conversation.forest import VotingForest
from storebot.conversation.seed import DEFAULT_RESPONSES, FALLBACK_RESPONSES


class TestStorebotContainer:
    """Test session construction from settings."""

    def test_sessions_are_independent(self):
        container = StorebotContainer(Settings())
        first = container.create_session()
        second = container.create_session()

        assert first.engine is not second.engine
        first.add_exemplar("promo code", "SAVE10")
        assert second.get_stats()["exemplars"] == len(DEFAULT_RESPONSES)

    def test_forest_configured_from_settings(self):
        container = StorebotContainer(Settings(n_estimators=5, max_features=0.5))
        session = container.create_session({"hello": "Hi", "bye": "Bye"})

        classifier = session.engine.snapshot.model.classifier
        assert isinstance(classifier, VotingForest)
        assert classifier.n_estimators == 5

    def test_fallback_seed_is_reproducible(self):
        container = StorebotContainer(Settings(fallback_seed=11))
        first = container.create_session({"hello": "Hi"})
        second = container.create_session({"hello": "Hi"})

        picks = [first.resolve("???") for _ in range(8)]
        assert picks == [second.resolve("???") for _ in range(8)]
        assert set(picks) <= set(FALLBACK_RESPONSES)

    def test_custom_fallbacks(self):
        container = StorebotContainer(Settings())
        session = container.create_session({"hello": "Hi"}, fallback_responses=["Nope."])
        assert session.resolve("xyz") == "Nope."

    def test_legacy_labels(self):
        container = StorebotContainer(Settings(stable_labels=False))
        session = container.create_session({"a": "X", "b": "Y"})
        session.add_exemplar("b", "Z")

        assert session.engine.snapshot.model.responses == {0: "X", 1: "Z"}

    def test_stable_labels(self):
        container = StorebotContainer(Settings(stable_labels=True))
        session = container.create_session({"a": "X", "b": "Y"})
        session.add_exemplar("b", "Z")

        assert session.engine.snapshot.model.responses == {0: "X", 2: "Z"}

    def test_defaults_to_module_settings(self):
        from storebot.config.settings import settings

        assert StorebotContainer().settings is settings
