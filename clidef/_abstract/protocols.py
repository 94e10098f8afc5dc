#!/usr/bin/env python3
"""
Protocols the clidef structures and processors satisfy
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import abc
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel

# ##-- end 3rd party imports

if TYPE_CHECKING:
    from clidef._structs.cli import CLI
    from clidef._structs.command_line import CommandLine

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ProtocolModelMeta(type(Protocol), type(BaseModel)):
    """ Use as the metaclass for pydantic models which are explicit Protocol implementers """
    pass

@runtime_checkable
class Buildable_p(Protocol):
    """ For things that need building, but don't have a separate factory """

    @classmethod
    def build(cls, data:dict) -> Any:
        pass

@runtime_checkable
class ParamStruct_p(Protocol):
    """ Base class for the declared parameters of a CLI """

    @property
    def key(self) -> str|int:
        pass

    def convert(self, raw:str) -> Any:
        pass

@runtime_checkable
class ArgParser_p(Protocol):
    """
    A Single standard process point for turning the list of passed in args
    into a CommandLine
    """

    def parse(self, cli:CLI, args:Sequence[str], *, validate:bool=True) -> CommandLine:
        pass

@runtime_checkable
class UsageFormatter_p(Protocol):

    def format(self, cli:CLI) -> str:
        pass
