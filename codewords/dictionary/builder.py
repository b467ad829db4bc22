"""Turn the WordNet archive into the generated word list modules."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self

from codewords import logging
from codewords.config import WORDNET_URL
from codewords.dictionary import archive, source
from codewords.dictionary.emitter import write_word_lists
from codewords.dictionary.filters import MAX_WORD_LEN, MIN_WORD_LEN, filter_words
from codewords.dictionary.lexicon import PARTS_OF_SPEECH, PartOfSpeech
from codewords.dictionary.parser import parse_headwords
from codewords.errors import InvalidConfiguration
from codewords.utils import package_dir

if TYPE_CHECKING:
    from dynaconf import Dynaconf  # type: ignore[import]


class BuildOptions(BaseModel):
    """Options for a dictionary build."""

    model_config = ConfigDict(frozen=True)

    url: str = WORDNET_URL
    cache_dir: Path = Path(".")
    output_dir: Path = Field(default_factory=lambda: package_dir("words"))
    timeout: float = Field(default=60.0, gt=0)
    min_len: int = Field(default=MIN_WORD_LEN, ge=1)
    max_len: int = Field(default=MAX_WORD_LEN, ge=1)
    excluded: frozenset[str] = frozenset()
    save: bool = False

    @model_validator(mode="after")
    def check_lengths(self) -> Self:
        """Make sure the length bounds describe a non-empty range."""
        if self.min_len > self.max_len:
            raise ValueError(
                f"min_len ({self.min_len}) is greater than "
                f"max_len ({self.max_len})"
            )
        return self

    @classmethod
    def from_settings(cls, settings: "Dynaconf", **overrides: Any) -> Self:
        """Build options from settings; `None` overrides are ignored."""
        values: dict[str, Any] = {
            "url": settings.WORDNET_URL,
            "cache_dir": settings.CACHE_DIR,
            "timeout": settings.DOWNLOAD_TIMEOUT,
            "min_len": settings.MIN_WORD_LEN,
            "max_len": settings.MAX_WORD_LEN,
            "excluded": frozenset(settings.EXCLUDED_WORDS),
        }
        if settings.OUTPUT_DIR:
            values["output_dir"] = settings.OUTPUT_DIR
        values.update(
            {key: value for key, value in overrides.items() if value is not None}
        )
        return cls(**values)


@dataclass
class BuildResult:
    """Summary of a dictionary build."""

    raw_counts: dict[str, int] = field(default_factory=dict)
    kept_counts: dict[str, int] = field(default_factory=dict)
    paths: dict[str, Path] = field(default_factory=dict)

    @property
    def combinations(self) -> int:
        """Number of distinct codewords the new lists can produce."""
        total = 1
        for count in self.kept_counts.values():
            total *= count
        return total


class DictionaryBuilder:
    """Acquire, parse, filter and emit the WordNet word lists."""

    parts_of_speech: tuple[PartOfSpeech, ...] = PARTS_OF_SPEECH

    def __init__(self, options: BuildOptions | None = None):
        """Initialize the builder."""
        self.options = options or BuildOptions()

    def acquire(self) -> bytes:
        """Get the raw WordNet archive."""
        return source.acquire(
            self.options.url,
            cache_dir=self.options.cache_dir,
            timeout=self.options.timeout,
            save=self.options.save,
        )

    def extract(self, data: bytes) -> dict[PartOfSpeech, list[str]]:
        """Read the candidate headwords of every part of speech."""
        indexes = archive.read_members(
            data, [pos.index for pos in self.parts_of_speech]
        )
        candidates = {}
        for pos in self.parts_of_speech:
            words = parse_headwords(indexes[pos.index].splitlines(), pos.marker)
            logging.info(f"Parsed {len(words)} {pos.name} from {pos.index}")
            candidates[pos] = words
        return candidates

    def filter_candidates(
        self, candidates: list[str], pos: PartOfSpeech
    ) -> list[str]:
        """Filter the candidates of one part of speech."""
        words = filter_words(
            candidates,
            min_len=self.options.min_len,
            max_len=self.options.max_len,
            excluded=self.options.excluded,
        )
        logging.info(f"Kept {len(words)} of {len(candidates)} {pos.name}")
        if not words:
            raise InvalidConfiguration(
                f"No {pos.name} left after filtering with word lengths "
                f"{self.options.min_len}-{self.options.max_len}"
            )
        return words

    def build(self) -> BuildResult:
        """Run a full build and write the word list modules.

        Both lists are computed before anything is written, and both
        modules are swapped in together, so a failing build never leaves
        one list updated and the other stale.
        """
        result = BuildResult()
        candidates = self.extract(self.acquire())
        filtered: dict[PartOfSpeech, list[str]] = {}
        for pos, words in candidates.items():
            result.raw_counts[pos.name] = len(words)
            filtered[pos] = self.filter_candidates(words, pos)
            result.kept_counts[pos.name] = len(filtered[pos])

        self.options.output_dir.mkdir(parents=True, exist_ok=True)
        paths = write_word_lists(
            self.options.output_dir,
            {pos.module: (pos.variable, words) for pos, words in filtered.items()},
        )
        for pos, words in filtered.items():
            result.paths[pos.name] = paths[pos.module]
            logging.info(f"Wrote {len(words)} {pos.name} to {paths[pos.module]}")
        return result


def build_dictionary(options: BuildOptions | None = None) -> BuildResult:
    """Build the word lists with the given options."""
    return DictionaryBuilder(options).build()
