"""Tests for the codeword generator."""
import pytest

from codewords import ADJECTIVES, NOUNS, Generator, InvalidConfiguration, new_generator


def test_single_words_always_give_the_same_codeword():
    generator = Generator(["happy"], ["dog"])
    assert all(generator.generate() == "happy-dog" for _ in range(50))


def test_codeword_halves_come_from_the_lists():
    generator = new_generator(seed=1234)
    for _ in range(200):
        codeword = generator.generate()
        assert codeword
        assert codeword.count("-") == 1
        adjective, noun = codeword.split("-")
        assert adjective in ADJECTIVES
        assert noun in NOUNS


def test_many_draws_use_more_than_one_word():
    codewords = new_generator().generate_many(1000)
    adjectives = {codeword.split("-")[0] for codeword in codewords}
    nouns = {codeword.split("-")[1] for codeword in codewords}
    assert len(adjectives) > 1
    assert len(nouns) > 1


def test_same_seed_same_sequence():
    first = Generator(seed=42).generate_many(25)
    second = Generator(seed=42).generate_many(25)
    assert first == second


def test_generators_do_not_share_random_state():
    reference = Generator(seed=7).generate_many(10)
    generator = Generator(seed=7)
    other = Generator(seed=7)
    other.generate_many(3)
    assert generator.generate_many(10) == reference


@pytest.mark.parametrize(
    "adjectives, nouns", [([], ["dog"]), (["happy"], []), ([], [])]
)
def test_empty_word_list_is_invalid(adjectives, nouns):
    generator = Generator(adjectives, nouns)
    with pytest.raises(InvalidConfiguration):
        generator.generate()


def test_construction_copies_the_lists():
    adjectives = ["happy"]
    generator = Generator(adjectives, ["dog"])
    adjectives.append("sad")
    assert generator.adjectives == ("happy",)


def test_combinations():
    assert Generator(["a", "b"], ["c", "d", "e"]).combinations == 6
    assert new_generator().combinations == len(ADJECTIVES) * len(NOUNS)


def test_generate_many_rejects_negative_count():
    with pytest.raises(ValueError):
        new_generator().generate_many(-1)
    assert new_generator().generate_many(0) == []
