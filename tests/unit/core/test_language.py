"""Tests for language helpers."""

import re

import pytest

from formwright.core.errors import ConfigError
from formwright.core.language import camel_case_description, generate_terms, split_words


@pytest.mark.parametrize(
    "name,expected",
    [
        ("firstName", ["first", "name"]),
        ("FirstName", ["first", "name"]),
        ("first_name", ["first", "name"]),
        ("seat-class", ["seat", "class"]),
        ("HTTPServer", ["http", "server"]),
        ("Tip percentage", ["tip", "percentage"]),
        ("sixInch", ["six", "inch"]),
    ],
)
def test_split_words(name, expected):
    assert split_words(name) == expected


def test_camel_case_description():
    assert camel_case_description("nineGrainWheat") == "nine grain wheat"


def test_camel_case_description_without_words_keeps_name():
    assert camel_case_description("__") == "__"


class TestGenerateTerms:
    def test_longest_phrases_first(self):
        """
        GIVEN a three word identifier
        WHEN terms are generated with max phrase length 2
        THEN two-word phrases come before single words
        """
        terms = generate_terms("nineGrainWheat", 2)

        assert len(terms) == 5
        assert terms[:2] == [r"\bnine\s+grains?\b", r"\bgrain\s+wheats?\b"]

    def test_phrase_length_capped_by_word_count(self):
        assert generate_terms("open", 3) == [r"\bopens?\b"]

    def test_plural_is_optional(self):
        [term] = generate_terms("topping", 1)
        assert re.fullmatch(term, "toppings")
        assert re.fullmatch(term, "topping")

    def test_words_ending_in_s_are_not_doubled(self):
        assert generate_terms("glass", 1) == [r"\bglass\b"]

    def test_generation_is_pure(self):
        assert generate_terms("footLong", 2) == generate_terms("footLong", 2)

    def test_non_positive_length_rejected(self):
        with pytest.raises(ConfigError):
            generate_terms("open", 0)
