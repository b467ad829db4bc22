"""Drop words that make messy codewords.

Words with underscores, apostrophes, hyphens, dots, slashes or digits are
compounds, abbreviations or inflected forms in WordNet. Very short and very
long words are dropped too.
"""

import re
from collections.abc import Collection, Iterable

FORBIDDEN = re.compile(r"[_'\-./0-9]")
LOWERCASE_ASCII = re.compile(r"[a-z]+")

MIN_WORD_LEN = 4
MAX_WORD_LEN = 15


def is_codeword_friendly(
    word: str,
    min_len: int = MIN_WORD_LEN,
    max_len: int = MAX_WORD_LEN,
    excluded: Collection[str] = (),
) -> bool:
    """Check whether a word can be used in a codeword."""
    if FORBIDDEN.search(word):
        return False
    if not min_len <= len(word) <= max_len:
        return False
    if not LOWERCASE_ASCII.fullmatch(word):
        return False
    return word not in excluded


def filter_words(
    words: Iterable[str],
    min_len: int = MIN_WORD_LEN,
    max_len: int = MAX_WORD_LEN,
    excluded: Collection[str] = (),
) -> list[str]:
    """Keep the codeword friendly words, preserving their order."""
    excluded = frozenset(excluded)
    return [
        word
        for word in words
        if is_codeword_friendly(word, min_len, max_len, excluded)
    ]
