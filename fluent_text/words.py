#
# words.py
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
Splits arbitrary strings into words, for use by case conversion.
"""

import logging
import re
from typing import Iterator

logger = logging.getLogger(__name__)

__all__ = ["COMBINING_MARKS", "SEPARATOR_REGEX", "words", "split_case"]

# Anything that isn't a letter or a digit: whitespace, hyphens,
# underscores and punctuation alike. Combining marks stay with the
# letter they decorate, so decomposed (NFD/NFKD) text is not split.
COMBINING_MARKS = r"\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"
SEPARATOR_REGEX = re.compile(rf"(?:[^\w{COMBINING_MARKS}]|_)+")


def split_case(run) -> Iterator[str]:
    """
    Splits a run of letters and digits on its case shifts.

    An uppercase letter begins a new word when it follows a lowercase
    letter or a digit ("helloWorld"), or when it ends an uppercase run
    and is itself followed by lowercase ("HTMLParser" -> "HTML", "Parser").
    """

    start = 0
    for index in range(1, len(run)):
        current = run[index]
        if not current.isupper():
            continue

        previous = run[index - 1]
        if previous.isupper():
            following = run[index + 1 : index + 2]
            if not following.islower():
                continue

        yield run[start:index]
        start = index

    if start < len(run):
        yield run[start:]


def words(value, pattern=None) -> Iterator[str]:
    """
    Lazily yields the words in the given string.

    If 'pattern' is given (a string or compiled regular expression), every
    non-empty, non-overlapping match of it is a word instead, and the
    default separator and case rules are not applied at all.
    """

    if pattern is not None:
        logger.debug("Splitting words on custom pattern %r", pattern)
        for match in re.finditer(pattern, value):
            word = match.group(0)
            if word:
                yield word
        return

    for run in SEPARATOR_REGEX.split(value):
        if run:
            yield from split_case(run)
