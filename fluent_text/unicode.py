#
# unicode.py
#
# fluent-text - A fluent string builder
# Copyright (c) 2017-2020 Jake Richardson, Ammon Smith, jackylam5
#
# fluent-text is available free of charge under the terms of the MIT
# License. You are free to redistribute and/or modify it under those
# terms. It is distributed in the hopes that it will be useful, but
# WITHOUT ANY WARRANTY. See the LICENSE file for more details.
#

import re
import string
import unicodedata

__all__ = [
    "CONTRACTION_REGEX",
    "ESCAPES",
    "READABLE_CHAR_SET",
    "normalize_caseless",
    "strip_contractions",
    "unicode_repr",
]

READABLE_CHAR_SET = frozenset(string.printable) - frozenset("\t\n\r\x0b\x0c")

# Apostrophe and right single quotation mark
CONTRACTION_REGEX = re.compile("['\N{RIGHT SINGLE QUOTATION MARK}]")


def normalize_caseless(s):
    """
    Shifts the string into a uniform case (lowercase),
    but also accounting for unicode characters. Used
    for case-insenstive comparisons.
    """

    return unicodedata.normalize("NFKD", s.casefold())


def strip_contractions(s):
    """Removes apostrophes, so "don't" becomes one word and not two."""

    return CONTRACTION_REGEX.sub("", s)


ESCAPES = {"\n": "\\n", "\t": "\\t", '"': '\\"', "\\": "\\\\"}


def _escape(ch):
    if ch in ESCAPES:
        return ESCAPES[ch]
    if ch in READABLE_CHAR_SET:
        return ch

    num = ord(ch)
    if num < 0x100:
        return f"\\x{num:02x}"
    if num < 0x10000:
        return f"\\u{num:04x}"
    return f"\\U{num:08x}"


def unicode_repr(s):
    """
    Quotes the string, escaping every character outside READABLE_CHAR_SET
    so builders with control or non-ASCII characters print unambiguously.
    """

    return '"' + "".join(map(_escape, s)) + '"'
