#!/usr/bin/env python3
"""
Errors raised while building a command line definition
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

from ._base import CLIDefError

class ConfigurationError(CLIDefError):
    """ A CLI, Option or Argument definition is malformed or collides with another """
    general_msg = "CLI Definition Error:"
    pass
