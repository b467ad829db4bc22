"""WordNet lexicon types."""

from dataclasses import dataclass
from typing import NamedTuple


class RawLexiconEntry(NamedTuple):
    """A headword read from a WordNet index file."""

    word: str
    pos: str


@dataclass(frozen=True)
class PartOfSpeech:
    """A part of speech we extract from WordNet."""

    name: str
    """Plural name, also the stem of the generated module."""
    marker: str
    """The pos field used in the WordNet index file."""
    index: str
    """Path of the index file inside the WordNet archive."""
    variable: str
    """Name of the tuple in the generated module."""

    @property
    def module(self) -> str:
        """Filename of the generated module."""
        return f"{self.name}.py"


ADJECTIVE = PartOfSpeech("adjectives", "a", "dict/index.adj", "ADJECTIVES")
NOUN = PartOfSpeech("nouns", "n", "dict/index.noun", "NOUNS")

PARTS_OF_SPEECH = (ADJECTIVE, NOUN)
