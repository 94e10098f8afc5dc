##-- imports
from __future__ import annotations

# import abc
# import datetime
import enum
import functools as ftz
import itertools as itz
import logging as logmod
import re
import types
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import more_itertools as mitz
from clidef import errors
from clidef._structs.command_line import CommandLine
from clidef.constants import (END_OF_OPTIONS, LONG_PREFIX, PROPERTY_SEP,
                              SHORT_PREFIX)

if TYPE_CHECKING:
    from clidef._structs.argument import Argument
    from clidef._structs.cli import CLI
    from clidef._structs.option import Option

class CLIParser:
    """
    convert a sequence of tokens into a CommandLine by a single left to right scan.

    # {prog} [options] [--] [args]

    Token precedence, first match wins:
    1. --              : every later token is positional
    2. --name[=val]    : long option
    3. -Dkey=val       : property of the option with short name D
    4. -name[=val]     : single hyphen long option, when name is a declared long name
    5. -abc, -O2       : short cluster, flags until the first value taking option,
                         which takes the rest of the token, or the next token
    6. anything else   : positional value

    All scan state lives in the call to `parse`, so one parser,
    and one CLI, can be used for any number of parses.
    """

    class _ParseState(enum.Enum):
        OPTIONS    = enum.auto()
        POSITIONAL = enum.auto()

    class _Scan:
        """ The per-parse state of the scan """

        def __init__(self, cli:CLI, args:Sequence[str], *, validate:bool):
            self.cli       = cli
            self.tokens    = mitz.peekable(args)
            self.result    = CommandLine(cli)
            self.focus     = CLIParser._ParseState.OPTIONS
            self.cursor    = 0
            self.validate  = validate

    def parse(self, cli:CLI, args:Sequence[str], *, validate:bool=True) -> CommandLine:
        """
          Parses the sequence of tokens against the options and arguments of the cli.
          Raises MissingValueError, UnknownOptionError and FlagValueError,
          Validation failures are collected on the returned CommandLine.
        """
        match args:
            case str():
                raise TypeError("Parse expects a sequence of tokens, not a string", args)
            case _:
                args = list(args)

        logging.debug("Parsing args for %s: %s", cli.name, args)
        PS    = CLIParser._ParseState
        scan  = CLIParser._Scan(cli, args, validate=validate)

        for token in scan.tokens:
            logging.debug("Handling: %s, State: %s", token, scan.focus)
            match scan.focus:
                case PS.POSITIONAL:
                    self._handle_positional(scan, token)
                case PS.OPTIONS if token == END_OF_OPTIONS:
                    logging.debug("End of options")
                    scan.focus = PS.POSITIONAL
                case PS.OPTIONS if token.startswith(LONG_PREFIX):
                    self._handle_long(scan, token, token.removeprefix(LONG_PREFIX))
                case PS.OPTIONS if self._is_property(cli, token):
                    self._handle_property(scan, token)
                case PS.OPTIONS if self._is_single_hyphen_long(cli, token):
                    self._handle_long(scan, token, token.removeprefix(SHORT_PREFIX))
                case PS.OPTIONS if token.startswith(SHORT_PREFIX) and token != SHORT_PREFIX:
                    self._handle_short_cluster(scan, token)
                case _:
                    self._handle_positional(scan, token)

        self._inject_defaults(scan)
        self._check_help(scan)
        if validate:
            self._validate(scan)

        result = scan.result
        result.valid = not (bool(result.errors) or result.asking_for_help)
        logging.debug("Parsed: %r", result)
        return result

    ##-- classification

    def _find_long(self, cli:CLI, name:str) -> None|Option:
        for opt in cli.options:
            if opt.long_name is not None and opt.long_name == name:
                return opt
        else:
            return None

    def _find_short(self, cli:CLI, char:str) -> None|Option:
        for opt in cli.options:
            if opt.short_name is not None and opt.short_name == char:
                return opt
        else:
            return None

    def _is_property(self, cli:CLI, token:str) -> bool:
        """ -Dkey=value, for D the short name of a properties option """
        if token.startswith(LONG_PREFIX) or len(token) < 3 or not token.startswith(SHORT_PREFIX):
            return False

        match self._find_short(cli, token[1]):
            case None:
                return False
            case opt:
                return opt.properties

    def _is_single_hyphen_long(self, cli:CLI, token:str) -> bool:
        """ -name or -name=value, where name is exactly a declared long name """
        name = token.removeprefix(SHORT_PREFIX).partition(PROPERTY_SEP)[0]
        return 1 < len(name) and self._find_long(cli, name) is not None

    def _looks_like_option(self, cli:CLI, token:str) -> bool:
        """ Whether a token would be read as an option, rather than a value """
        match token:
            case x if x == END_OF_OPTIONS:
                return True
            case x if x.startswith(LONG_PREFIX):
                # declared or not, --name is never a value
                return True
            case x if x.startswith(SHORT_PREFIX) and 1 < len(x):
                return self._is_single_hyphen_long(cli, x) or self._find_short(cli, x[1]) is not None
            case _:
                return False

    ##-- end classification

    ##-- handlers

    def _take_next_value(self, scan:_Scan, option:Option, token:str) -> None|str:
        """ Consume the next token as the value of an option """
        match scan.tokens.peek(None):
            case str() as x if not self._looks_like_option(scan.cli, x):
                return next(scan.tokens)
            case _ if not scan.validate:
                logging.debug("No value for %s, ignored", option)
                return None
            case None:
                raise errors.MissingValueError("Option %s expects a value, but none remain", token, param=option.key)
            case x:
                raise errors.MissingValueError("Option %s expects a value, but was followed by option %s", token, x, param=option.key)

    def _unknown(self, scan:_Scan, token:str, name:str) -> None:
        if scan.cli.permissive or not scan.validate:
            logging.debug("Keeping unknown option token: %s", token)
            scan.result.add_unparsed(token)
            return

        raise errors.UnknownOptionError("Unknown option '%s' in token: %s", name, token, param=name)

    def _handle_long(self, scan:_Scan, token:str, body:str) -> None:
        """ --name, --name=value, --name value """
        name, sep, attached = body.partition(PROPERTY_SEP)
        match self._find_long(scan.cli, name):
            case None:
                self._unknown(scan, token, name)
            case opt if opt.flag and bool(sep):
                raise errors.FlagValueError("Flag %s can't take a value: %s", name, token, param=opt.key)
            case opt if opt.flag:
                logging.debug("Setting Flag: %s", opt.key)
                scan.result.add_option_value(opt, None)
            case opt if bool(sep):
                logging.debug("Setting: %s = %s", opt.key, attached)
                scan.result.add_option_value(opt, attached)
            case opt:
                value = self._take_next_value(scan, opt, token)
                logging.debug("Setting: %s = %s", opt.key, value)
                scan.result.add_option_value(opt, value)

    def _handle_property(self, scan:_Scan, token:str) -> None:
        """ -Dkey=value, -D=key=value """
        opt   = self._find_short(scan.cli, token[1])
        value = token[2:].removeprefix(PROPERTY_SEP)
        logging.debug("Setting Property: %s : %s", opt.key, value)
        scan.result.add_option_value(opt, value)

    def _handle_short_cluster(self, scan:_Scan, token:str) -> None:
        """ -abc, -O2, -O=2, -xvf value.
        The whole cluster is resolved before any values are set,
        so an unknown character leaves the CommandLine untouched.
        """
        chars                                   = token.removeprefix(SHORT_PREFIX)
        resolved : list[tuple[Option, None|str]] = []
        needs_next : None|Option                = None
        for i, char in enumerate(chars):
            match self._find_short(scan.cli, char):
                case None:
                    self._unknown(scan, token, char)
                    return
                case opt if opt.flag and chars[i+1:].startswith(PROPERTY_SEP):
                    raise errors.FlagValueError("Flag %s can't take a value: %s", char, token, param=opt.key)
                case opt if opt.flag:
                    resolved.append((opt, None))
                case opt if i + 1 < len(chars):
                    attached = chars[i+1:].removeprefix(PROPERTY_SEP)
                    resolved.append((opt, attached))
                    break
                case opt:
                    needs_next = opt
                    break

        if needs_next is not None:
            resolved.append((needs_next, self._take_next_value(scan, needs_next, token)))

        for opt, value in resolved:
            logging.debug("Setting: %s = %s", opt.key, value)
            scan.result.add_option_value(opt, value)

    def _handle_positional(self, scan:_Scan, token:str) -> None:
        arguments = scan.cli.arguments
        match arguments[scan.cursor] if scan.cursor < len(arguments) else None:
            case None:
                logging.debug("Extra positional value: %s", token)
                scan.result.add_argument_value(None, token)
            case arg if arg.multi_valued:
                logging.debug("Adding to Argument %s: %s", arg.display_name, token)
                scan.result.add_argument_value(arg, token)
            case arg:
                logging.debug("Setting Argument %s: %s", arg.display_name, token)
                scan.result.add_argument_value(arg, token)
                scan.cursor += 1

    ##-- end handlers

    ##-- post scan

    def _inject_defaults(self, scan:_Scan) -> None:
        for param in itz.chain(scan.cli.options, scan.cli.arguments):
            if param.default_value is None:
                continue
            if scan.result.set_default(param):
                logging.debug("Default for %s: %s", param.key, param.default_value)

    def _check_help(self, scan:_Scan) -> None:
        scan.result.asking_for_help = any(scan.result.is_flag_enabled(x.key) for x in scan.cli.help_options)
        if scan.result.asking_for_help:
            logging.info("Help requested for %s", scan.cli.name)

    def _validate(self, scan:_Scan) -> None:
        """ Collect every validation failure of the completed scan """
        result  = scan.result
        found   = result.errors
        for opt in scan.cli.options:
            values  = result.get_raw_values(opt.key)
            present = result.is_flag_enabled(opt.key) if opt.flag else bool(values)
            if opt.required and not opt.help and not present and not result.asking_for_help:
                found.append(errors.MissingOptionError("Missing required option: %s", opt, param=opt.key))
            if not opt.accepts_more_values and 1 < len(values):
                found.append(errors.TooManyValuesError("Option %s takes a single value: %s", opt, values, param=opt.key))
            found += self._check_values(opt, values)

        for arg in scan.cli.arguments:
            values = result.get_raw_argument_values(arg.index)
            if arg.required and not bool(values) and not result.asking_for_help:
                found.append(errors.MissingArgumentError("Missing required argument: %s", arg, param=arg.index))
            found += self._check_values(arg, values)

        if scan.cli.bounded and bool(result.extra_arguments):
            found.append(errors.TooManyValuesError("Too many positional values: %s", result.extra_arguments, param=None))

        for err in found:
            logging.debug("Validation Failure: %s", err)

    def _check_values(self, param:Option|Argument, values:list[str]) -> list[errors.ValidationError]:
        found   = []
        choices = getattr(param, "choices", None)
        for val in values:
            if choices is not None and val not in choices:
                found.append(errors.InvalidValueError("Value '%s' for %s is not one of: %s", val, param, choices, param=param.key))
                continue
            try:
                param.convert(val)
            except errors.InvalidValueError as err:
                found.append(err)
        else:
            return found

    ##-- end post scan
