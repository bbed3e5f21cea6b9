"""
Bag-of-words tokenizer shared by vocabulary building and vectorization.
"""

import re
from typing import List

# Everything that is not a letter, digit or whitespace. \w also admits the
# underscore, which is stripped like any other punctuation.
_STRIP_PATTERN = re.compile(r"[^\w\s]|_")


def normalize(text: str) -> str:
    """Trim and lowercase text; the key used for exact matching."""
    return text.strip().lower()


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase word tokens.

    Punctuation is removed rather than replaced, so "don't" becomes "dont".

    Example:
        >>> tokenize("Hello, World!  How's it going?")
        ['hello', 'world', 'hows', 'it', 'going']
    """
    cleaned = _STRIP_PATTERN.sub("", text.lower())
    return [token for token in cleaned.split() if token]
