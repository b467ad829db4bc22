"""Generate codewords of the form <adjective>-<noun>."""

import random
import time
from collections.abc import Sequence

from codewords.errors import InvalidConfiguration
from codewords.words import ADJECTIVES, NOUNS


class Generator:
    """Pick codewords from a pair of word lists.

    Each generator owns its random source. A single instance must not be
    shared between threads without a lock; create one per thread instead.

    Codewords are not unique and, since the default words come straight
    from WordNet, may be unsuitable for some audiences.
    """

    adjectives: tuple[str, ...]
    nouns: tuple[str, ...]

    def __init__(
        self,
        adjectives: Sequence[str] = ADJECTIVES,
        nouns: Sequence[str] = NOUNS,
        seed: int | str | bytes | None = None,
    ):
        """Initialize the generator, seeding from the clock by default."""
        if seed is None:
            seed = time.time_ns()
        self.adjectives = tuple(adjectives)
        self.nouns = tuple(nouns)
        self._random = random.Random(seed)

    @property
    def combinations(self) -> int:
        """Number of distinct codewords this generator can produce."""
        return len(self.adjectives) * len(self.nouns)

    def generate(self) -> str:
        """Return a random codeword."""
        if not self.adjectives:
            raise InvalidConfiguration("Generator has no adjectives.")
        if not self.nouns:
            raise InvalidConfiguration("Generator has no nouns.")
        adjective = self.adjectives[self._random.randrange(len(self.adjectives))]
        noun = self.nouns[self._random.randrange(len(self.nouns))]
        return f"{adjective}-{noun}"

    def generate_many(self, count: int) -> list[str]:
        """Return `count` codewords, duplicates included."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.generate() for _ in range(count)]

    def __repr__(self):
        """Get the string representation of the generator."""
        return "<Generator: {} adjectives, {} nouns>".format(
            len(self.adjectives), len(self.nouns)
        )


def new_generator(seed: int | str | bytes | None = None) -> Generator:
    """Create a generator over the embedded WordNet word lists."""
    return Generator(ADJECTIVES, NOUNS, seed=seed)
