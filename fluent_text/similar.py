#
# similar.py
#
# fluent-text - A fluent string builder
# Copyright (c) 2017-2020 Jake Richardson, Ammon Smith, jackylam5
#
# fluent-text is available free of charge under the terms of the MIT
# License. You are free to redistribute and/or modify it under those
# terms. It is distributed in the hopes that it will be useful, but
# WITHOUT ANY WARRANTY. See the LICENSE file for more details.
#

import textdistance

from fluent_text.unicode import normalize_caseless

__all__ = ["similarity"]


def similarity(first, second) -> float:
    """
    Determines how similar two strings are, from 0.0 to 1.0.
    An alias for textdistance.overlap.similarity(), ignoring case.
    """

    return textdistance.overlap.similarity(
        normalize_caseless(str(first)), normalize_caseless(str(second))
    )
