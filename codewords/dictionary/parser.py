"""Parse headwords out of WordNet index files.

An index file line looks like::

    happy a 4 3 ! & + 4 2 01148283 01150915 02564986 01151786

The first field is the lemma and the second its part of speech. The
licence header at the top of each file is indented by two spaces, so it
never matches.
"""

import re
from collections.abc import Iterable, Iterator

from codewords.dictionary.lexicon import RawLexiconEntry

INDEX_LINE = re.compile(r"^(\S+)\s+(\S+)(?:\s|$)")


def parse_entries(lines: Iterable[str]) -> Iterator[RawLexiconEntry]:
    """Yield the (word, pos) pair of every index line."""
    for line in lines:
        match = INDEX_LINE.match(line)
        if match:
            yield RawLexiconEntry(*match.groups())


def parse_headwords(lines: Iterable[str], marker: str) -> list[str]:
    """Get the words tagged with the `marker` part of speech, in file order."""
    return [entry.word for entry in parse_entries(lines) if entry.pos == marker]
