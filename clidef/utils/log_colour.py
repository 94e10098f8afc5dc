#!/usr/bin/env python3
"""
Logging formatters that add, or strip, terminal colours.
"""

##-- builtin imports
from __future__ import annotations

import logging
import re
from collections import defaultdict
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

##-- end builtin imports

from sty import bg, ef, fg, rs

LEVEL_MAP    = defaultdict(lambda: rs.all)
COLOUR_RESET = rs.all
LEVEL_MAP.update({
    logging.DEBUG    : fg.grey,
    logging.INFO     : fg.blue,
    logging.WARNING  : fg.yellow,
    logging.ERROR    : fg.red,
    logging.CRITICAL : fg.red,
    "blue"           : fg.blue,
    "cyan"           : fg.cyan,
    "green"          : fg.green,
    "red"            : fg.red,
    "yellow"         : fg.yellow,
    "bold"           : ef.bold,
    "RESET"          : rs.all
    })

class ColourFormatter(logging.Formatter):
    """
    Stream Formatter, enables use of colour sent to console.
    A record with a 'colour' attribute uses that instead of its level's colour.

    # Do *not* use for on filehandler
    """

    _default_fmt : ClassVar[str] = '{asctime} | {levelname:9} | {message}'
    _default_date_fmt : str      =  "%H:%M:%S"
    _default_style               = '{'

    def __init__(self, *, fmt=None):
        """
        Create the Formatter with a given *Brace* style log format
        """
        super().__init__(fmt or self._default_fmt,
                         datefmt=self._default_date_fmt,
                         style=self._default_style)
        self.colours = LEVEL_MAP

    def format(self, record):
        log_colour = self.colours[record.levelno]
        if hasattr(record, "colour"):
            log_colour = self.colours[record.colour]

        return log_colour + super().format(record) + COLOUR_RESET

class ColourStripFormatter(logging.Formatter):
    """
    Force Colour Command codes to be stripped out of a string.
    Useful for when you redirect printed strings with colour
    to a file
    """

    _default_fmt         = "{asctime} | {levelname:9} | {name:25} | {message}"
    _default_date_fmt    = "%Y-%m-%d %H:%M:%S"
    _default_style       = '{'
    _colour_strip_re     = re.compile(r'\x1b\[([\d;]+)m?')

    def __init__(self, *, fmt=None):
        super().__init__(fmt or self._default_fmt,
                         datefmt=self._default_date_fmt,
                         style=self._default_style)

    def format(self, record):
        result    = super().format(record)
        no_colour = self._colour_strip_re.sub("", result)
        return no_colour
