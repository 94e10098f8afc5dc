#!/usr/bin/env python3
"""



"""
# Import:
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

# Body:
class CLIDefError(Exception):
    """
      The base class for all clidef Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific clidef Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class ParamError(CLIDefError):
    """
      An error about a specific option or argument.
      `param` is the option key or argument index it is attributable to.
    """

    def __init__(self, *args, param:None|str|int=None):
        super().__init__(*args)
        self.param = param
