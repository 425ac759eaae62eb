#
# __init__.py
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
fluent-text - A fluent string builder
"""

from . import casing, config, fragments, similar, text, unicode, words
from .text import Text

__version__ = "0.1.0"
