"""
Conversation package: trainable canned-response engine.

Maps free-text utterances to canned responses through a bag-of-words
classifier that store operators can extend at runtime.

Components:
    - tokenize / normalize: Text normalization
    - VocabularyIndex: Token → feature position per build cycle
    - FeatureVectorizer: Token-count vectors
    - ExemplarStore: Ordered (input, response) training pairs
    - ClassifierEngine: Ensemble training and prediction
    - ResponseResolver: Exact → classifier → substring → fallback
    - TrainingCoordinator: Add exemplars and retrain atomically
    - ChatSession: Per-session facade over all of the above
"""

from storebot.conversation.tokenizer import normalize, tokenize
from storebot.conversation.vocabulary import Vocabulary, VocabularyIndex
from storebot.conversation.features import FeatureVectorizer
from storebot.conversation.exemplars import Exemplar, ExemplarStore, make_exemplar
from storebot.conversation.labels import ResponseRegistry
from storebot.conversation.forest import VotingForest
from storebot.conversation.classifier import ClassifierEngine, TrainedModel
from storebot.conversation.engine import ChatEngine, EngineSnapshot
from storebot.conversation.resolver import Resolution, ResponseResolver
from storebot.conversation.trainer import TrainingCoordinator
from storebot.conversation.session import ChatSession
from storebot.conversation.seed import DEFAULT_RESPONSES, FALLBACK_RESPONSES

__all__ = [
    # Text
    "normalize",
    "tokenize",
    # Features
    "Vocabulary",
    "VocabularyIndex",
    "FeatureVectorizer",
    # Exemplars
    "Exemplar",
    "ExemplarStore",
    "make_exemplar",
    # Classification
    "ResponseRegistry",
    "VotingForest",
    "ClassifierEngine",
    "TrainedModel",
    # Engine
    "ChatEngine",
    "EngineSnapshot",
    "ResponseResolver",
    "Resolution",
    "TrainingCoordinator",
    "ChatSession",
    # Seed data
    "DEFAULT_RESPONSES",
    "FALLBACK_RESPONSES",
]
