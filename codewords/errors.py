"""Codewords errors."""


class CodewordsError(Exception):
    """Base class for all codewords errors."""


class InvalidConfiguration(CodewordsError):  # noqa: N818
    """A generator was asked for a codeword without words to pick from."""


class SourceUnavailable(CodewordsError):  # noqa: N818
    """The WordNet archive could not be read locally or downloaded."""

    def __init__(self, message: str, url: str | None = None):
        """Initialize the error with the url that was being fetched."""
        super().__init__(message)
        self.url = url


class CorruptArchive(CodewordsError):  # noqa: N818
    """The WordNet archive could not be decompressed or is incomplete."""
