"""Human-memorable <adjective>-<noun> codewords."""

from .errors import CodewordsError, CorruptArchive, InvalidConfiguration, SourceUnavailable  # noqa: F401, E402, I001
from .generator import Generator, new_generator  # noqa: F401, E402, I001
from .words import ADJECTIVES, NOUNS  # noqa: F401, E402, I001

__version__ = "0.1.0"
