"""Build the codeword lists from the Princeton WordNet database."""

from .builder import BuildOptions, BuildResult, DictionaryBuilder, build_dictionary  # noqa: F401, E402, I001
from .lexicon import ADJECTIVE, NOUN, PARTS_OF_SPEECH, PartOfSpeech, RawLexiconEntry  # noqa: F401, E402, I001
