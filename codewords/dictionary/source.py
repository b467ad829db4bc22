"""Acquire the WordNet database.

A local copy named after the last segment of the download url is used when
present; otherwise the archive is downloaded.
"""

from pathlib import Path

import requests

from codewords import logging
from codewords.errors import SourceUnavailable
from codewords.utils import filename_from_url


def local_path(url: str, cache_dir: str | Path = ".") -> Path:
    """Get the path where a local copy of `url` is expected."""
    filename = filename_from_url(url)
    if not filename:
        raise SourceUnavailable(
            f"Failed to parse filename from WordNet url: {url!r}", url=url
        )
    return Path(cache_dir) / filename


def download(url: str, timeout: float) -> bytes:
    """Download the archive into memory."""
    logging.info(f"Downloading WordNet database from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.content
    except requests.RequestException as e:
        raise SourceUnavailable(
            f"Failed to download WordNet database, url={url}: {e}", url=url
        ) from e


def acquire(
    url: str,
    cache_dir: str | Path = ".",
    timeout: float = 60.0,
    save: bool = False,
) -> bytes:
    """Get the WordNet archive, from the cache directory or the network."""
    path = local_path(url, cache_dir)
    if path.is_file():
        logging.info(f"Using local WordNet database {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise SourceUnavailable(
                f"Failed to read WordNet database {path}: {e}", url=url
            ) from e

    logging.debug(f"No local WordNet database at {path}")
    data = download(url, timeout)
    logging.info(f"Downloaded {len(data)} bytes")
    if save:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logging.info(f"Saved WordNet database to {path}")
    return data
