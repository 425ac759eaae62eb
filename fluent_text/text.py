#
# text.py
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
The fluent string builder.

Methods that add to the builder (append, prepend, times, lines...) change it
in place and return the same object, so they can be chained. Every other
method leaves the builder alone and returns either a new Text or a plain
Python value.
"""

import logging
import random
import re
import unicodedata
from typing import List, Optional, Union

from fluent_text import casing
from fluent_text.config import get_config
from fluent_text.fragments import FragmentBuffer, coerce
from fluent_text.similar import similarity
from fluent_text.unicode import normalize_caseless, unicode_repr
from fluent_text.words import words as split_words

logger = logging.getLogger(__name__)

__all__ = ["Input", "Text", "UUID_REGEX"]

UUID_REGEX = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)

Input = Union[str, int, float, "Text"]


class Text:
    __slots__ = ("_buffer",)

    # Mutable, so not hashable
    __hash__ = None

    def __init__(self, *inputs: Input):
        self._buffer = FragmentBuffer(*inputs)

    @classmethod
    def make(cls, *inputs: Input) -> "Text":
        return cls(*inputs)

    @classmethod
    def random(cls, length: Optional[int] = None) -> "Text":
        """
        Generates a random alphanumeric string, 16 characters long by default.
        This uses the 'random' module, so it is NOT cryptographically secure.
        """

        config = get_config()
        if length is None:
            length = config.random_length

        logger.debug("Generating random text of length %d", length)
        return cls(
            "".join(random.choice(config.random_characters) for _ in range(length))
        )

    def _derive(self, value):
        return type(self)(value)

    @property
    def fragments(self):
        return self._buffer.fragments

    # Fluent expansion

    def append(self, *inputs: Input) -> "Text":
        self._buffer.append(*inputs)
        return self

    concat = append

    def prepend(self, *inputs: Input) -> "Text":
        self._buffer.prepend(*inputs)
        return self

    def times(self, input: Input, count: float = 1) -> "Text":
        """
        Appends the input 'count' times, but never fewer than once.
        Fractional counts are rounded up.
        """

        self._buffer.times(input, count)
        return self

    def space(self, count=1):
        return self.times(" ", count)

    def new_line(self, count=1):
        return self.times(get_config().line_break, count)

    nl = new_line

    def append_line(self, *inputs: Input) -> "Text":
        return self.append(get_config().line_break, *inputs)

    line = append_line

    def prepend_line(self, *inputs: Input) -> "Text":
        return self.prepend(*inputs, get_config().line_break)

    def append_lines(self, *lines: Input) -> "Text":
        line_break = get_config().line_break
        for line in lines:
            self._buffer.append(line_break, line)

        return self

    def prepend_lines(self, *lines: Input) -> "Text":
        """
        Prepends each line on its own line. The result never starts with a
        line break, and existing content is moved down onto a new line.
        """

        if not lines:
            return self

        line_break = get_config().line_break
        fragments = []
        for index, line in enumerate(lines):
            if index:
                fragments.append(line_break)
            fragments.append(line)

        if self._buffer:
            fragments.append(line_break)

        self._buffer.prepend(*fragments)
        return self

    # Substrings

    def before(self, search: Input) -> "Text":
        """Gets the portion of the string before the first occurrence of 'search'."""

        value = str(self)
        search = coerce(search)
        if not search:
            return self._derive(value)

        return self._derive(value.partition(search)[0])

    def before_last(self, search: Input) -> "Text":
        """Gets the portion of the string before the last occurrence of 'search'."""

        value = str(self)
        search = coerce(search)
        if not search:
            return self._derive(value)

        head, found, _ = value.rpartition(search)
        return self._derive(head if found else value)

    def after(self, search: Input) -> "Text":
        """Gets the remainder of the string after the first occurrence of 'search'."""

        value = str(self)
        search = coerce(search)
        if not search:
            return self._derive(value)

        _, found, tail = value.partition(search)
        return self._derive(tail if found else value)

    def after_last(self, search: Input) -> "Text":
        """Gets the remainder of the string after the last occurrence of 'search'."""

        value = str(self)
        search = coerce(search)
        if not search:
            return self._derive(value)

        _, found, tail = value.rpartition(search)
        return self._derive(tail if found else value)

    def between(self, start: Input, end: Input) -> "Text":
        """
        Gets the portion between the first 'start' and the last 'end'.
        For instance, "blowout" between "l" and "u" is "owo".
        """

        return self.after(start).before_last(end)

    def inside(self, start: Input, end: Input) -> "Text":
        """
        Gets the portion between the last 'start' and the next 'end'.
        For instance, "aabbcc" inside "a" and "c" is "bb".
        """

        return self.after_last(start).before(end)

    def finish(self, cap: Input) -> "Text":
        """Caps the string with a single instance of 'cap'."""

        value = str(self)
        cap = coerce(cap)
        return self._derive(value if value.endswith(cap) else value + cap)

    def is_uuid(self) -> bool:
        return UUID_REGEX.fullmatch(str(self)) is not None

    # Case

    def lower(self):
        return self._derive(str(self).lower())

    def upper(self):
        return self._derive(str(self).upper())

    def casefold(self):
        return self._derive(str(self).casefold())

    def caseless(self):
        return self._derive(normalize_caseless(str(self)))

    def title(self):
        return self._derive(str(self).title())

    def capitalize(self):
        return self._derive(str(self).capitalize())

    def words(self, pattern=None) -> List[str]:
        return list(split_words(str(self), pattern))

    def case(self, reducer: casing.Reducer) -> "Text":
        """
        Converts the case using a custom reducer, which receives
        the result so far, the next word, and that word's index.
        """

        return self._derive(casing.convert_case(str(self), reducer))

    def kebab_case(self):
        return self._derive(casing.kebab_case(str(self)))

    def snake_case(self):
        return self._derive(casing.snake_case(str(self)))

    def camel_case(self):
        return self._derive(casing.camel_case(str(self)))

    def pascal_case(self):
        return self._derive(casing.pascal_case(str(self)))

    # Passthrough transformations

    def trim(self, chars=None):
        return self._derive(str(self).strip(chars))

    def trim_start(self, chars=None):
        return self._derive(str(self).lstrip(chars))

    def trim_end(self, chars=None):
        return self._derive(str(self).rstrip(chars))

    def _padding(self, length, fill):
        missing = length - len(self)
        if missing <= 0 or not fill:
            return ""

        return (fill * (missing // len(fill) + 1))[:missing]

    def pad_start(self, length: int, fill: str = " ") -> "Text":
        """Pads the start with 'fill', repeated and cut to reach 'length'."""

        return self._derive(self._padding(length, coerce(fill)) + str(self))

    def pad_end(self, length: int, fill: str = " ") -> "Text":
        """Pads the end with 'fill', repeated and cut to reach 'length'."""

        return self._derive(str(self) + self._padding(length, coerce(fill)))

    def repeat(self, count: int) -> "Text":
        return self._derive(str(self) * count)

    def slice(self, start: int, end: Optional[int] = None) -> "Text":
        return self._derive(str(self)[start:end])

    def char_at(self, index: int) -> "Text":
        value = str(self)
        return self._derive(value[index] if 0 <= index < len(value) else "")

    def replace(self, pattern, replacement, count=-1):
        """
        Replaces occurrences of 'pattern'. Plain strings are replaced
        literally, compiled regular expressions with re.sub() semantics.
        By default every occurrence is replaced; a negative 'count' means
        all of them and zero means none, whichever kind of pattern is given.
        """

        value = str(self)
        if isinstance(pattern, re.Pattern):
            if count == 0:
                return self._derive(value)

            # re.sub() treats 0 as "no limit"
            return self._derive(pattern.sub(replacement, value, count=max(count, 0)))

        return self._derive(value.replace(coerce(pattern), coerce(replacement), count))

    def normalize(self, form="NFC"):
        return self._derive(unicodedata.normalize(form, str(self)))

    # Inspection

    def split(self, sep=None, maxsplit=-1) -> List[str]:
        value = str(self)
        if sep == "":
            return list(value)

        return value.split(sep, maxsplit)

    def includes(self, search: Input) -> bool:
        return coerce(search) in str(self)

    def starts_with(self, prefix: Input) -> bool:
        return str(self).startswith(coerce(prefix))

    def ends_with(self, suffix: Input) -> bool:
        return str(self).endswith(coerce(suffix))

    def index_of(self, search: Input, start: int = 0) -> int:
        return str(self).find(coerce(search), start)

    def last_index_of(self, search: Input) -> int:
        return str(self).rfind(coerce(search))

    def match(self, pattern, flags=0):
        return re.search(pattern, str(self), flags)

    def match_all(self, pattern, flags=0):
        return list(re.finditer(pattern, str(self), flags))

    def search(self, pattern, flags=0) -> int:
        match = re.search(pattern, str(self), flags)
        return -1 if match is None else match.start()

    def similarity(self, other: Input) -> float:
        return similarity(self, other)

    def bytes(self, encoding="utf-8"):
        return self._buffer.bytes(encoding)

    # Serialization

    def join(self, sep: str = "") -> str:
        """Returns each fragment of this builder as a string, separated by 'sep'."""

        return self._buffer.join(sep)

    def copy(self):
        return self._derive(self)

    def __str__(self):
        return self.join()

    def __repr__(self):
        return f"Text({unicode_repr(str(self))})"

    def __len__(self):
        return len(self._buffer)

    def __bool__(self):
        return bool(self._buffer)

    def __eq__(self, other):
        if isinstance(other, (str, Text)):
            return str(self) == str(other)

        return NotImplemented

    def __contains__(self, item):
        return coerce(item) in str(self)

    def __getitem__(self, key):
        return self._derive(str(self)[key])

    def __add__(self, other):
        if isinstance(other, (str, int, float, Text)):
            return type(self)(self, other)

        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, (str, int, float, Text)):
            return type(self)(other, self)

        return NotImplemented
