"""
Storebot: trainable canned-response chat engine for storefront assistants.

Free-text utterances are resolved to canned responses through a tiered
lookup (exact match, ensemble classifier, substring, fallback). Store
operators extend the response set at runtime; every addition retrains the
session's classifier synchronously.
"""

__version__ = "0.1.0"

from storebot.container import StorebotContainer
from storebot.config.settings import Settings
from storebot.conversation.session import ChatSession
from storebot.conversation.resolver import Resolution, ResponseResolver
from storebot.conversation.trainer import TrainingCoordinator
from storebot.errors import StorebotError, TrainingError, ValidationError

__all__ = [
    "StorebotContainer",
    "Settings",
    "ChatSession",
    "ResponseResolver",
    "Resolution",
    "TrainingCoordinator",
    "StorebotError",
    "TrainingError",
    "ValidationError",
]
