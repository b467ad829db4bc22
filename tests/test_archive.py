"""Tests for reading the WordNet archive."""
import gzip

import pytest

from codewords.dictionary.archive import read_members
from codewords.errors import CorruptArchive

from .conftest import INDEX_ADJ, make_archive

INDEXES = ["dict/index.adj", "dict/index.noun"]


def test_reads_requested_members(wordnet_bytes):
    members = read_members(wordnet_bytes, INDEXES)
    assert set(members) == set(INDEXES)
    assert members["dict/index.adj"] == INDEX_ADJ


def test_dot_slash_member_names():
    data = make_archive({"./dict/index.adj": "happy a 1\n"})
    assert read_members(data, ["dict/index.adj"]) == {
        "dict/index.adj": "happy a 1\n"
    }


def test_missing_member_is_fatal():
    data = make_archive({"dict/index.adj": INDEX_ADJ})
    with pytest.raises(CorruptArchive, match="dict/index.noun"):
        read_members(data, INDEXES)


def test_not_gzip():
    with pytest.raises(CorruptArchive):
        read_members(b"definitely not a tarball", INDEXES)


def test_gzip_but_not_tar():
    with pytest.raises(CorruptArchive):
        read_members(gzip.compress(b"plain text, no tar headers here"), INDEXES)


def test_truncated_archive(wordnet_bytes):
    with pytest.raises(CorruptArchive):
        read_members(wordnet_bytes[: len(wordnet_bytes) // 2], INDEXES)
