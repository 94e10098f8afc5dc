#!/usr/bin/env python3
"""
Errors found after a completed scan.
These are collected on the CommandLine, not raised by the parse.
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

from ._base import ParamError

class ValidationError(ParamError):
    general_msg = "CLI Validation Failure:"
    pass

class MissingOptionError(ValidationError):
    """ A required option received no value and has no default """
    general_msg = "Missing Required Option:"
    pass

class MissingArgumentError(ValidationError):
    """ A required argument received no value and has no default """
    general_msg = "Missing Required Argument:"
    pass

class TooManyValuesError(ValidationError):
    """ A single valued parameter, or a bounded CLI, received too many values """
    general_msg = "Too Many Values:"
    pass

class InvalidValueError(ValidationError):
    """ A value is outside the declared choices, or can't be converted """
    general_msg = "Invalid Value:"
    pass
