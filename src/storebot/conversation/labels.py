"""
Response label registry.

Maps each distinct response text to an integer class id. The registry lives
as long as its session, so a response keeps the same id across retrains.
"""

from typing import Dict, Iterable, List, Optional

from storebot.conversation.exemplars import Exemplar


class ResponseRegistry:
    """
    Stable response → label id assignment.

    Ids are handed out sequentially the first time a response is seen and
    are never reused or renumbered.

    Example:
        >>> registry = ResponseRegistry()
        >>> registry.label_for("Hi!"), registry.label_for("Bye!"), registry.label_for("Hi!")
        (0, 1, 0)
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._responses: List[str] = []

    def label_for(self, response: str) -> int:
        """Return the id for a response, registering it if new."""
        label = self._ids.get(response)
        if label is None:
            label = len(self._responses)
            self._ids[response] = label
            self._responses.append(response)
        return label

    def response_for(self, label: int) -> Optional[str]:
        """Reverse lookup; None for ids never issued."""
        if 0 <= label < len(self._responses):
            return self._responses[label]
        return None

    def __contains__(self, response: object) -> bool:
        return response in self._ids

    def __len__(self) -> int:
        return len(self._responses)

    def __repr__(self) -> str:
        return f"ResponseRegistry(labels={len(self._responses)})"


def first_seen_labels(exemplars: Iterable[Exemplar]) -> Dict[str, int]:
    """
    Number distinct responses in first-seen order over one exemplar pass.

    This is the legacy scheme: ids depend on the current exemplar order and
    can shift between retrains.
    """
    labels: Dict[str, int] = {}
    for exemplar in exemplars:
        if exemplar.response not in labels:
            labels[exemplar.response] = len(labels)
    return labels
