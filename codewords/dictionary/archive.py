"""Read index files out of the WordNet tarball."""

import io
import tarfile
import zlib
from collections.abc import Iterable

from codewords import logging
from codewords.errors import CorruptArchive


def _member_name(name: str) -> str:
    """Normalize a tar member name."""
    return name[2:] if name.startswith("./") else name


def read_members(
    data: bytes, names: Iterable[str], encoding: str = "utf-8"
) -> dict[str, str]:
    """Decompress a .tar.gz archive and return the text of the named files.

    Every requested file must be present; a WordNet archive without its
    index files is treated as corrupt rather than as an empty dictionary.
    """
    wanted = set(names)
    found: dict[str, str] = {}
    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tar:
            for member in tar:
                name = _member_name(member.name)
                if name not in wanted or not member.isfile():
                    continue
                fp = tar.extractfile(member)
                if fp is None:  # pragma: no cover
                    continue
                logging.debug(f"Extracting {name} ({member.size} bytes)")
                found[name] = fp.read().decode(encoding, errors="replace")
    except (tarfile.TarError, EOFError, OSError, zlib.error) as e:
        raise CorruptArchive(f"Failed to read WordNet archive: {e}") from e

    missing = sorted(wanted - found.keys())
    if missing:
        raise CorruptArchive(
            f"WordNet archive is missing {', '.join(missing)}"
        )
    return found
