"""Tests for the shipped word lists."""
import pytest

from codewords.dictionary.emitter import render_word_list
from codewords.dictionary.filters import is_codeword_friendly
from codewords.utils import package_dir
from codewords.words import ADJECTIVES, NOUNS


@pytest.mark.parametrize("words", [ADJECTIVES, NOUNS], ids=["adjectives", "nouns"])
def test_word_lists_are_usable(words):
    assert isinstance(words, tuple)
    assert words
    assert all(is_codeword_friendly(word) for word in words)


@pytest.mark.parametrize(
    "module, variable, words",
    [("adjectives.py", "ADJECTIVES", ADJECTIVES), ("nouns.py", "NOUNS", NOUNS)],
)
def test_word_list_modules_match_the_emitter(module, variable, words):
    shipped = package_dir("words", module).read_text(encoding="utf-8").splitlines()
    rendered = render_word_list(variable, words).splitlines()
    assert all(line.startswith("# ") for line in shipped[:2])
    assert shipped[2:] == rendered[2:]
