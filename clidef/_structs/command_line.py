#!/usr/bin/env python3
"""
The result of parsing one token sequence against a CLI.

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

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clidef import errors
from clidef.constants import PROPERTY_SEP

# ##-- end 1st party imports

if TYPE_CHECKING:
    from clidef._structs.argument import Argument
    from clidef._structs.cli import CLI
    from clidef._structs.option import Option

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CommandLine:
    """
      Holds the raw string values collected by a parse,
      keyed by option key and argument index.

      Populated by the parser, then only read.
      Lookups of names or indices the CLI never declared raise UnknownKeyError,
      declared but unset parameters give None or [].
    """

    def __init__(self, cli:CLI):
        self.cli                                      = cli
        self.valid                                    = True
        self.asking_for_help                          = False
        self.errors            : list[errors.CLIDefError] = []
        self._option_values    : dict[str, list[str]] = {}
        self._seen             : set[str]             = set()
        self._argument_values  : dict[int, list[str]] = {}
        self._extra            : list[str]            = []
        self._unparsed         : list[str]            = []
        self._all_arguments    : list[str]            = []

    ##-- population, used by the parser

    def add_option_value(self, option:Option, value:None|str) -> None:
        """ Record an occurrence of an option, with its value if it takes one """
        self._seen.add(option.key)
        match value:
            case None:
                self._option_values.setdefault(option.key, [])
            case str() if option.accepts_more_values:
                self._option_values.setdefault(option.key, []).append(value)
            case str():
                self._option_values[option.key] = [value]

    def add_argument_value(self, argument:None|Argument, value:str) -> None:
        self._all_arguments.append(value)
        match argument:
            case None:
                self._extra.append(value)
            case _:
                self._argument_values.setdefault(argument.index, []).append(value)

    def add_unparsed(self, token:str) -> None:
        self._unparsed.append(token)

    def set_default(self, param:Option|Argument) -> bool:
        """ Inject a default value for a parameter with no values. returns True if injected """
        match param.key:
            case str() as key if not bool(self._option_values.get(key, None)):
                self._option_values[key] = [param.default_value]
            case int() as key if not bool(self._argument_values.get(key, None)):
                self._argument_values[key] = [param.default_value]
            case _:
                return False

        return True

    ##-- end population

    ##-- lookup

    def _option(self, name:str) -> Option:
        match self.cli.get_option(name):
            case None:
                raise errors.UnknownKeyError("Option %s is not declared by %s", name, self.cli.name, param=name)
            case opt:
                return opt

    def _argument(self, index:int) -> Argument:
        match self.cli.get_argument(index):
            case None:
                raise errors.UnknownKeyError("Argument %s is not declared by %s", index, self.cli.name, param=index)
            case arg:
                return arg

    ##-- end lookup

    def is_valid(self) -> bool:
        return self.valid

    def is_asking_for_help(self) -> bool:
        return self.asking_for_help

    def get_option_value(self, name:str) -> Any:
        """ The first value of the option, converted by the option's type. None when unset """
        opt = self._option(name)
        match self._option_values.get(opt.key, []):
            case []:
                return None
            case [x, *_]:
                return opt.convert(x)

    def get_option_values(self, name:str) -> list[Any]:
        opt = self._option(name)
        return [opt.convert(x) for x in self._option_values.get(opt.key, [])]

    def get_raw_value(self, name:str) -> None|str:
        match self.get_raw_values(name):
            case []:
                return None
            case [x, *_]:
                return x

    def get_raw_values(self, name:str) -> list[str]:
        opt = self._option(name)
        return list(self._option_values.get(opt.key, []))

    def get_properties(self, name:str) -> dict[str, str]:
        """ Split the key=value pairs a properties option collected """
        result = {}
        for raw in self.get_raw_values(name):
            key, _, val = raw.partition(PROPERTY_SEP)
            result[key] = val
        else:
            return result

    def is_flag_enabled(self, name:str) -> bool:
        """ True if the option occurred at least once """
        return self._option(name).key in self._seen

    def is_option_assigned(self, name:str) -> bool:
        """ True if the option occurred and received a value """
        opt = self._option(name)
        return opt.key in self._seen and bool(self._option_values.get(opt.key, []))

    def get_argument_value(self, index:int) -> Any:
        arg = self._argument(index)
        match self._argument_values.get(arg.index, []):
            case []:
                return None
            case [x, *_]:
                return arg.convert(x)

    def get_argument_values(self, index:int) -> list[Any]:
        arg = self._argument(index)
        return [arg.convert(x) for x in self._argument_values.get(arg.index, [])]

    def get_raw_argument_values(self, index:int) -> list[str]:
        return list(self._argument_values.get(self._argument(index).index, []))

    def is_argument_assigned(self, index:int) -> bool:
        return bool(self.get_raw_argument_values(index))

    @property
    def extra_arguments(self) -> list[str]:
        """ Positional values beyond the last declared argument """
        return list(self._extra)

    @property
    def all_arguments(self) -> list[str]:
        """ Every positional value given, in order, excluding defaults """
        return list(self._all_arguments)

    @property
    def unparsed(self) -> list[str]:
        """ Unknown option tokens, kept by a permissive parse """
        return list(self._unparsed)

    def raise_for_errors(self) -> None:
        """ Raise the validation failures of the parse, if any """
        match self.errors:
            case []:
                return
            case [x]:
                raise x
            case [*xs]:
                raise errors.InvalidCommandLineError("%s validation errors for %s", len(xs), self.cli.name, errors=xs)

    def to_guard(self) -> TomlGuard:
        """ A TomlGuard view of the raw values, keyed by option key and argument name """
        data = {
            "name"      : self.cli.name,
            "valid"     : self.valid,
            "help"      : self.asking_for_help,
            "options"   : {x.key : self._flag_or_values(x) for x in self.cli.options if x.key in self._option_values},
            "arguments" : {x.display_name : list(self._argument_values[x.index]) for x in self.cli.arguments if x.index in self._argument_values},
            "extra"     : self.extra_arguments,
            "unparsed"  : self.unparsed,
            }
        return TomlGuard(data)

    def _flag_or_values(self, option:Option) -> bool|list[str]:
        if option.flag:
            return option.key in self._seen
        return list(self._option_values[option.key])

    def _state(self) -> tuple:
        return (self.valid, self.asking_for_help,
                [str(x) for x in self.errors],
                self._option_values, self._seen, self._argument_values,
                self._extra, self._unparsed, self._all_arguments)

    def __eq__(self, other) -> bool:
        match other:
            case CommandLine():
                return self.cli is other.cli and self._state() == other._state()
            case _:
                return NotImplemented

    def __repr__(self):
        return f"<CommandLine: {self.cli.name} valid={self.valid} help={self.asking_for_help}>"
