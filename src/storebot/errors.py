"""
Exception hierarchy for the storebot engine.

ValidationError reaches callers of ``add_exemplar``. TrainingError is
raised inside the classifier layer and recovered there, so ``resolve``
callers never see it.
"""


class StorebotError(Exception):
    """Base class for all storebot errors."""


class ValidationError(StorebotError, ValueError):
    """Training input rejected (empty input or response after trimming)."""


class TrainingError(StorebotError, RuntimeError):
    """The ensemble trainer could not fit the current feature matrix."""
