#
# fragments.py
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
Ordered storage for the pieces of a string under construction.
"""

from math import ceil

__all__ = ["FragmentBuffer", "coerce"]


def coerce(item):
    """Converts an accepted input (str, number, Text) into a fragment."""

    return item if isinstance(item, str) else str(item)


class FragmentBuffer:
    __slots__ = ("_fragments",)

    def __init__(self, *items):
        self._fragments = [coerce(item) for item in items]

    @property
    def fragments(self):
        return tuple(self._fragments)

    def append(self, *items):
        self._fragments.extend(coerce(item) for item in items)

    def prepend(self, *items):
        self._fragments[:0] = [coerce(item) for item in items]

    def times(self, item, count=1):
        # Always at least once; fractional counts round up
        fragment = coerce(item)
        self._fragments.extend(fragment for _ in range(ceil(max(count, 1))))

    def join(self, sep=""):
        return sep.join(self._fragments)

    def clear(self):
        self._fragments.clear()

    def copy(self):
        return FragmentBuffer(*self._fragments)

    def bytes(self, encoding="utf-8"):
        return str(self).encode(encoding)

    def __str__(self):
        return self.join()

    def __repr__(self):
        return f"<FragmentBuffer ({len(self._fragments)} fragments, {len(self)} chars) at 0x{id(self):08x}>"

    def __bool__(self):
        return any(self._fragments)

    def __len__(self):
        return sum(map(len, self._fragments))
