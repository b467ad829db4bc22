"""Utility functions for codewords."""

from collections.abc import Callable
from pathlib import Path
from typing import ParamSpec, TypeVar
from urllib.parse import urlsplit

P = ParamSpec("P")
R = TypeVar("R")


def cast_fn(type: Callable[P, R]):
    """Copy the signature of a function."""

    def cast(func: Callable) -> Callable[P, R]:
        return func  # type: ignore

    return cast


def filename_from_url(url: str) -> str:
    """Return the last path segment of a url, or an empty string."""
    path = urlsplit(url).path
    return path.rsplit("/", 1)[-1]


def package_dir(*parts: str) -> Path:
    """Get a path inside the installed codewords package."""
    return Path(__file__).parent.joinpath(*parts)
