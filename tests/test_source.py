"""Tests for acquiring the WordNet archive."""
import pytest
import requests

from codewords.dictionary import source
from codewords.errors import SourceUnavailable

URL = "http://wordnet.example.org/files/wn3.1.dict.tar.gz"


class FakeResponse:
    """Minimal stand-in for `requests.Response`."""

    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response=None, error=None):
        def get(url, timeout=None):
            calls.append((url, timeout))
            if error:
                raise error
            return response

        monkeypatch.setattr(source.requests, "get", get)
        return calls

    return install


def test_local_path(tmp_path):
    assert source.local_path(URL, tmp_path) == tmp_path / "wn3.1.dict.tar.gz"


def test_url_without_filename():
    with pytest.raises(SourceUnavailable):
        source.local_path("http://wordnet.example.org/", ".")


def test_local_copy_is_preferred(tmp_path, fake_get):
    calls = fake_get(error=AssertionError("should not download"))
    (tmp_path / "wn3.1.dict.tar.gz").write_bytes(b"local archive")
    assert source.acquire(URL, tmp_path) == b"local archive"
    assert calls == []


def test_download_when_missing(tmp_path, fake_get):
    calls = fake_get(FakeResponse(b"remote archive"))
    assert source.acquire(URL, tmp_path, timeout=5) == b"remote archive"
    assert calls == [(URL, 5)]
    assert not (tmp_path / "wn3.1.dict.tar.gz").exists()


def test_download_can_be_saved(tmp_path, fake_get):
    fake_get(FakeResponse(b"remote archive"))
    cache = tmp_path / "cache"
    source.acquire(URL, cache, save=True)
    assert (cache / "wn3.1.dict.tar.gz").read_bytes() == b"remote archive"


def test_http_error(tmp_path, fake_get):
    fake_get(FakeResponse(status_code=404))
    with pytest.raises(SourceUnavailable) as info:
        source.acquire(URL, tmp_path)
    assert info.value.url == URL


@pytest.mark.parametrize(
    "error",
    [
        requests.ConnectionError("no route to host"),
        requests.Timeout("timed out"),
        requests.exceptions.ChunkedEncodingError("connection broken"),
    ],
)
def test_network_failures(tmp_path, fake_get, error):
    fake_get(error=error)
    with pytest.raises(SourceUnavailable):
        source.acquire(URL, tmp_path)


def test_unreadable_local_copy(tmp_path, fake_get, monkeypatch):
    calls = fake_get(error=AssertionError("should not download"))
    (tmp_path / "wn3.1.dict.tar.gz").write_bytes(b"local archive")

    def read_bytes(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(source.Path, "read_bytes", read_bytes)
    with pytest.raises(SourceUnavailable, match="Failed to read") as info:
        source.acquire(URL, tmp_path)
    assert info.value.url == URL
    assert calls == []
