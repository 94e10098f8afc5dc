#!/usr/bin/env python3
"""
Errors that abort the scan of a token sequence
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import CLIDefError, ParamError
from .config import ConfigurationError

class ParseError(ParamError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "CLI Parsing Failure:"
    pass

class MissingValueError(ParseError):
    """ An option that takes a value was not given one """
    general_msg = "Missing Option Value:"
    pass

class UnknownOptionError(ParseError):
    """ A token looked like an option, but no such option is declared """
    general_msg = "Unknown Option:"
    pass

class FlagValueError(ParseError, ConfigurationError):
    """ A flag was given a value using --flag=value """
    general_msg = "Flags Take No Value:"
    pass

class InvalidCommandLineError(ParseError):
    """ Raised on demand, enumerating every validation failure of a parse """
    general_msg = "Invalid Command Line:"

    def __init__(self, *args, errors:None|list[CLIDefError]=None):
        super().__init__(*args)
        self.errors = list(errors or [])

    def __str__(self):
        head = super().__str__()
        return "\n".join([head, *(f"- {x}" for x in self.errors)])
