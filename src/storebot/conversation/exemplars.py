"""
Exemplar storage: ordered (input, response) training pairs.

The store keeps at most one exemplar per normalized input. Insertion order
is significant: it drives vocabulary numbering, legacy label numbering and
the substring-match tie-break.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from storebot.conversation.tokenizer import normalize
from storebot.errors import ValidationError


@dataclass(frozen=True)
class Exemplar:
    """A stored training pair. ``input`` is already normalized."""

    input: str
    response: str

    def __repr__(self) -> str:
        return f"Exemplar({self.input!r} -> {self.response[:30]!r})"


def make_exemplar(input_text: str, response_text: str) -> Exemplar:
    """
    Validate and normalize a raw training pair.

    Raises:
        ValidationError: If either string is empty after trimming
    """
    if not input_text or not input_text.strip():
        raise ValidationError("Exemplar input must not be empty")
    if not response_text or not response_text.strip():
        raise ValidationError("Exemplar response must not be empty")
    return Exemplar(input=normalize(input_text), response=response_text)


class ExemplarStore:
    """
    Ordered collection of exemplars keyed by normalized input.

    Overwriting an existing input replaces its response in place; the entry
    keeps its original position. The store never shrinks.

    Example:
        >>> store = ExemplarStore()
        >>> store.put(make_exemplar("hello", "Hi!"))
        True
        >>> store.put(make_exemplar("Hello", "Hey there"))
        False
        >>> store.get("hello").response
        'Hey there'
    """

    def __init__(self):
        self._entries: Dict[str, Exemplar] = {}

    def put(self, exemplar: Exemplar) -> bool:
        """
        Insert or overwrite an exemplar.

        Returns:
            True if the input was new, False if an existing entry was overwritten
        """
        is_new = exemplar.input not in self._entries
        self._entries[exemplar.input] = exemplar
        return is_new

    def get(self, normalized_input: str) -> Optional[Exemplar]:
        """Look up an exemplar by its normalized input."""
        return self._entries.get(normalized_input)

    def snapshot(self) -> Tuple[Exemplar, ...]:
        """Immutable view of all exemplars in insertion order."""
        return tuple(self._entries.values())

    def copy(self) -> "ExemplarStore":
        """Shallow copy preserving order; writers stage changes on it."""
        clone = ExemplarStore()
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, normalized_input: object) -> bool:
        return normalized_input in self._entries

    def __iter__(self) -> Iterator[Exemplar]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ExemplarStore(exemplars={len(self._entries)})"
