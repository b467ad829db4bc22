"""Word lists used by the generator, refreshed by `codewords build`."""

from .adjectives import ADJECTIVES  # noqa: F401, E402, I001
from .nouns import NOUNS  # noqa: F401, E402, I001
