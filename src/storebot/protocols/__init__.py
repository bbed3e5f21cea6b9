"""Structural interfaces for pluggable engine components."""

from storebot.protocols.classifier import EnsembleClassifier

__all__ = ["EnsembleClassifier"]
