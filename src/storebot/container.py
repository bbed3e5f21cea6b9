"""
Dependency container for storebot.

Holds configuration shared across sessions and builds independent
ChatSessions from it. Sessions never share engine state; the container
only shares settings.
"""

import random
from typing import Mapping, Optional, Sequence

from storebot.config.settings import Settings, settings as default_settings
from storebot.conversation.classifier import ClassifierFactory, default_classifier_factory
from storebot.conversation.seed import DEFAULT_RESPONSES, FALLBACK_RESPONSES
from storebot.conversation.session import ChatSession


class StorebotContainer:
    """
    Factory for configured chat sessions.

    Attributes:
        _settings: Settings every session is built from

    Example:
        >>> container = StorebotContainer()
        >>> alice = container.create_session()
        >>> bob = container.create_session()
        >>> alice.engine is bob.engine
        False
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize container.

        Args:
            settings: Configuration to use (module-level settings if None)
        """
        self._settings = settings or default_settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def create_classifier_factory(self) -> ClassifierFactory:
        """Classifier factory configured from settings."""
        return default_classifier_factory(
            n_estimators=self._settings.n_estimators,
            max_features=self._settings.max_features,
            random_state=self._settings.random_state,
        )

    def create_rng(self) -> random.Random:
        """Random source for fallback picks, seeded if configured."""
        return random.Random(self._settings.fallback_seed)

    def create_session(
        self,
        seed: Optional[Mapping[str, str]] = None,
        fallback_responses: Optional[Sequence[str]] = None,
    ) -> ChatSession:
        """
        Create a new, independently trained chat session.

        Args:
            seed: Initial input → response pairs (storefront defaults if None)
            fallback_responses: Pool for unmatched input (defaults if None)

        Returns:
            A ChatSession owning its own engine
        """
        return ChatSession(
            seed=DEFAULT_RESPONSES if seed is None else seed,
            fallback_responses=fallback_responses or FALLBACK_RESPONSES,
            classifier_factory=self.create_classifier_factory(),
            stable_labels=self._settings.stable_labels,
            rng=self.create_rng(),
        )

    def __repr__(self) -> str:
        s = self._settings
        return (
            f"StorebotContainer(trees={s.n_estimators}, "
            f"max_features={s.max_features}, stable_labels={s.stable_labels})"
        )
