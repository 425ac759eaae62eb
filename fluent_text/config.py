#
# config.py
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
Loads builder defaults from configuration files on disk
"""

import logging
import string
from collections import namedtuple

import toml
from schema import And, Optional, Or, Schema

logger = logging.getLogger(__name__)

__all__ = [
    "Configuration",
    "DEFAULT_CONFIG",
    "get_config",
    "load_config",
    "set_config",
]


def _is_length(value):
    """Accepts lengths written as integers or as strings of digits, above zero."""

    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            return False

    return int(value) > 0


Configuration = namedtuple(
    "Configuration", ("line_break", "random_length", "random_characters")
)

DEFAULT_CONFIG = Configuration(
    line_break="\n",
    random_length=16,
    random_characters=f"{string.ascii_uppercase}{string.ascii_lowercase}{string.digits}",
)

ConfigurationSchema = Schema(
    {
        Optional("text", default={}): {
            Optional("line-break", default=DEFAULT_CONFIG.line_break): And(str, len),
        },
        Optional("random", default={}): {
            Optional("length", default=DEFAULT_CONFIG.random_length): And(
                Or(int, str), _is_length
            ),
            Optional(
                "characters", default=DEFAULT_CONFIG.random_characters
            ): And(str, len),
        },
    }
)

_current_config = DEFAULT_CONFIG


def load_config(path):
    with open(path) as fh:
        config = toml.load(fh)

    config = ConfigurationSchema.validate(config)
    text = config["text"]
    random = config["random"]

    logger.info("Loaded text configuration from '%s'", path)
    return Configuration(
        line_break=text.get("line-break", DEFAULT_CONFIG.line_break),
        random_length=int(random.get("length", DEFAULT_CONFIG.random_length)),
        random_characters=random.get("characters", DEFAULT_CONFIG.random_characters),
    )


def get_config():
    """Returns the configuration builders currently read their defaults from."""

    return _current_config


def set_config(config):
    """
    Replaces the active configuration. Passing None restores the defaults.
    Meant to be called once, at start-up.

    This is process-wide state: every Text in every thread picks up the new
    line break (normally "\\n") and the new random length and alphabet
    (normally 16 characters of [A-Za-z0-9]) from then on. Leave it alone
    unless the whole program wants different defaults.
    """

    global _current_config

    _current_config = DEFAULT_CONFIG if config is None else config
    logger.debug("Active text configuration is now %r", _current_config)
