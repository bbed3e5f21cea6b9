"""
Classifier and resolution constants.

These are the defaults the settings layer falls back to. They are tuned for
small, interactively trained exemplar sets (low hundreds of entries).
"""

# ==============================================================================
# Ensemble Classifier
# ==============================================================================

DEFAULT_N_ESTIMATORS = 25
"""Number of decision trees in the bagged ensemble.
Retrain cost grows with exemplar count × tree count, so keep this small."""

DEFAULT_MAX_FEATURES = 0.8
"""Fraction of vocabulary features each tree considers per split."""

DEFAULT_RANDOM_STATE = 42
"""Fixed seed so retraining on the same exemplars yields the same forest."""

DEFAULT_BOOTSTRAP = True
"""Sample training rows with replacement for each tree."""

MIN_DISTINCT_LABELS = 2
"""Below this many distinct responses there is nothing to classify and
training is skipped."""

# ==============================================================================
# Response Resolution
# ==============================================================================

TIER_EXACT = "exact"
TIER_CLASSIFIER = "classifier"
TIER_SUBSTRING = "substring"
TIER_FALLBACK = "fallback"

# ==============================================================================
# Labels
# ==============================================================================

STABLE_LABELS = True
"""Assign label ids from a per-session registry that survives retrains.
False reproduces the legacy first-seen numbering recomputed on every retrain."""
