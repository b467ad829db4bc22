"""Shared fixtures for the codewords tests."""
import io
import tarfile
from pathlib import Path

import pytest

LICENSE_HEADER = (
    "  1 This software and database is being provided to you, the LICENSEE, by  \n"
    "  2 Princeton University under the following license.  By obtaining, using  \n"
)

INDEX_ADJ = LICENSE_HEADER + (
    "able a 2 4 ! = + ; 2 1 00001740 00002098  \n"
    "abandoned a 2 1 & 2 0 01317954 01318273  \n"
    "happy a 4 3 ! & + 4 2 01148283 01150915 02564986 01151786  \n"
    "ad_hoc a 1 1 & 1 0 01853679  \n"
    "o'clock a 1 0 1 0 00001740  \n"
    "well-known a 1 1 & 1 0 00001740  \n"
    "1st a 1 0 1 0 00001740  \n"
    "and/or a 1 0 1 0 00001740  \n"
    "a.m. a 1 0 1 0 00001740  \n"
    "big a 13 4 ! & ^ + 13 7 01382086 01384730  \n"
    "incomprehensibly a 1 0 1 0 00001740  \n"
    "happy a 4 3 ! & + 4 2 01148283 01150915 02564986 01151786  \n"
    "zealous a 1 2 & + 1 0 00887719  \n"
)

INDEX_NOUN = LICENSE_HEADER + (
    "cat n 8 3 @ ~ #m 8 1 02121620 02121808  \n"
    "dog n 7 4 @ ~ #m %p 7 1 02084071 10114209  \n"
    "harbor n 2 3 @ ~ + 2 0 08633957 08634377  \n"
    "meadow n 1 2 @ ~ 1 0 09359803  \n"
    "new_york n 3 2 @ #p 3 0 09119277  \n"
    "zebra n 1 3 @ ~ #m 1 1 02391049  \n"
)


def make_archive(members: dict[str, str]) -> bytes:
    """Build an in-memory .tar.gz holding the given text files."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, text in members.items():
            data = text.encode("utf-8")
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mtime = 0
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def wordnet_bytes() -> bytes:
    """A tiny WordNet-shaped archive."""
    return make_archive(
        {
            "dict/LICENSE": "WordNet Release 3.1\n",
            "dict/index.adj": INDEX_ADJ,
            "dict/index.noun": INDEX_NOUN,
        }
    )


@pytest.fixture
def wordnet_archive(tmp_path: Path, wordnet_bytes: bytes) -> Path:
    """The tiny archive saved where the builder looks for a local copy."""
    path = tmp_path / "cache" / "wn3.1.dict.tar.gz"
    path.parent.mkdir()
    path.write_bytes(wordnet_bytes)
    return path
