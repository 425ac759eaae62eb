#
# casing.py
#
# fluent-text - A fluent string builder
# Copyright (c) 2017-2020 Jake Richardson, Ammon Smith, jackylam5
#
# fluent-text is available free of charge under the terms of the MIT
# License. You are free to redistribute and/or modify it under those
# terms. It is distributed in the hopes that it will be useful, but
# WITHOUT ANY WARRANTY. See the LICENSE file for more details.
#

"""
Case conversions, built by folding the words of a string together.
"""

from functools import reduce
from typing import Callable

from fluent_text.unicode import strip_contractions
from fluent_text.words import words

__all__ = [
    "Reducer",
    "camel_case",
    "capitalize_first",
    "convert_case",
    "kebab_case",
    "pascal_case",
    "snake_case",
]

# (result so far, word, index of the word) -> new result
Reducer = Callable[[str, str, int], str]


def capitalize_first(word):
    """Uppercases the first character, leaving the rest alone."""

    return word[:1].upper() + word[1:]


def convert_case(value, reducer: Reducer) -> str:
    """
    Strips contractions from 'value', splits it into words,
    then folds those words together left to right with 'reducer'.
    """

    return reduce(
        lambda result, pair: reducer(result, pair[1], pair[0]),
        enumerate(words(strip_contractions(value))),
        "",
    )


def _joined(sep):
    def reducer(result, word, index):
        return f"{result}{sep}{word.lower()}" if index else word.lower()

    return reducer


def _camel(result, word, index):
    word = word.lower()
    return result + (capitalize_first(word) if index else word)


def _pascal(result, word, index):
    return result + capitalize_first(word.lower())


def kebab_case(value) -> str:
    return convert_case(value, _joined("-"))


def snake_case(value) -> str:
    return convert_case(value, _joined("_"))


def camel_case(value) -> str:
    return convert_case(value, _camel)


def pascal_case(value) -> str:
    return convert_case(value, _pascal)
