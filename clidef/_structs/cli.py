#!/usr/bin/env python3
"""
The CLI definition: the schema a token sequence is parsed against.

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
from clidef._structs.argument import Argument
from clidef._structs.option import Option
from clidef.formatters.usage import UsageFormatter
from clidef.parsers.parser import CLIParser

# ##-- end 1st party imports

if TYPE_CHECKING:
    from clidef._abstract.protocols import ArgParser_p, UsageFormatter_p
    from clidef._structs.command_line import CommandLine

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CLI:
    """
      A named, ordered, collection of Options and Arguments.

      Built once, using the fluent add_* / set_* methods or CLI.build,
      then reused for any number of `parse` calls.
      Mutating a CLI while another thread parses against it is not supported.
    """

    def __init__(self, name:str, *, summary:str="", description:str=""):
        if not isinstance(name, str) or not bool(name.strip()):
            raise errors.ConfigurationError("A CLI needs a name")

        self.name                          = name
        self.summary                       = summary
        self.description                   = description
        self.permissive                    = False
        self.bounded                       = False
        self._options    : list[Option]    = []
        self._arguments  : list[Argument]  = []

    @staticmethod
    def create(name:str) -> CLI:
        return CLI(name)

    @classmethod
    def build(cls, data:TomlGuard|dict) -> CLI:
        """ Build a complete definition from a mapping of
        {name, summary, description, permissive, bounded, options:[], arguments:[]}
        """
        match data:
            case TomlGuard():
                data = data._table()
            case dict():
                pass
            case _:
                raise errors.ConfigurationError("A CLI is built from a mapping", data)

        match data.get("name", None):
            case str() as name:
                pass
            case x:
                raise errors.ConfigurationError("A CLI definition needs a name: %s", x)

        cli = cls(name, summary=data.get("summary", ""), description=data.get("description", ""))
        cli.set_permissive(data.get("permissive", False))
        cli.set_bounded(data.get("bounded", False))
        for opt in data.get("options", []):
            cli.add_option(opt if isinstance(opt, Option) else Option.build(opt))

        for arg in data.get("arguments", []):
            cli.add_argument(arg if isinstance(arg, Argument) else Argument.build(arg))

        logging.debug("Built CLI: %s (%s options, %s arguments)", cli.name, len(cli._options), len(cli._arguments))
        return cli

    ##-- builder

    def set_summary(self, summary:str) -> CLI:
        self.summary = summary
        return self

    def set_description(self, description:str) -> CLI:
        self.description = description
        return self

    def set_permissive(self, permissive:bool=True) -> CLI:
        """ A permissive CLI keeps unknown option tokens instead of failing on them """
        self.permissive = bool(permissive)
        return self

    def set_bounded(self, bounded:bool=True) -> CLI:
        """ A bounded CLI treats positional values beyond its arguments as a validation error """
        self.bounded = bool(bounded)
        return self

    def add_option(self, option:Option) -> CLI:
        if not isinstance(option, Option):
            raise errors.ConfigurationError("Not an Option: %s", option)

        option.verify()
        for existing in self._options:
            if option.long_name is not None and option.long_name == existing.long_name:
                raise errors.ConfigurationError("Option long name collision: %s", option.long_name)
            if option.short_name is not None and option.short_name == existing.short_name:
                raise errors.ConfigurationError("Option short name collision: %s", option.short_name)
            # a one character long name reads the same as a short name
            if option.long_name is not None and option.long_name == existing.short_name:
                raise errors.ConfigurationError("Option long name %s collides with a short name", option.long_name)
            if option.short_name is not None and option.short_name == existing.long_name:
                raise errors.ConfigurationError("Option short name %s collides with a long name", option.short_name)

        self._check_cluster_collisions([*self._options, option])
        logging.debug("Adding Option to %s: %s", self.name, option)
        self._options.append(option)
        return self

    def _check_cluster_collisions(self, candidates:list[Option]) -> None:
        """ A single hyphen long name must not also read as a short cluster.
        eg: flags -v and -x make a long name 'vx' ambiguous,
        and a properties option -D makes any long name starting with 'D' ambiguous.

        A long name may start with its own option's short name when that option takes a value,
        as -o / --output, since both readings only set that option.
        """
        shorts = {x.short_name : x for x in candidates if x.short_name is not None}
        for opt in candidates:
            if opt.long_name is None or len(opt.long_name) < 2:
                continue
            for i, char in enumerate(opt.long_name):
                match shorts.get(char, None):
                    case None:
                        break
                    case x if i == 0 and x is opt and not x.flag:
                        break
                    case x if x.flag:
                        continue
                    case x:
                        raise errors.ConfigurationError("Long name -%s also reads as short option %s with value '%s'",
                                                        opt.long_name, x, opt.long_name[i+1:])
            else:
                raise errors.ConfigurationError("Long name -%s also reads as a cluster of short flags", opt.long_name)

    def add_options(self, *options:Option) -> CLI:
        for opt in options:
            self.add_option(opt)
        return self

    def add_argument(self, argument:Argument) -> CLI:
        """ Add a positional argument.
        An argument without an index is given the next one after the current highest.
        """
        if not isinstance(argument, Argument):
            raise errors.ConfigurationError("Not an Argument: %s", argument)

        if argument.index is None:
            next_index = 1 + max((x.index for x in self._arguments), default=-1)
            argument   = argument.model_copy(update={"index": next_index})

        if any(x.index == argument.index for x in self._arguments):
            raise errors.ConfigurationError("Argument index collision: %s", argument.index)

        multi = [x for x in [*self._arguments, argument] if x.multi_valued]
        match multi:
            case []:
                pass
            case [x] if all(y.index <= x.index for y in [*self._arguments, argument]):
                pass
            case [x]:
                raise errors.ConfigurationError("Only the last argument can be multi valued: %s", x.display_name)
            case [*xs]:
                raise errors.ConfigurationError("Only one argument can be multi valued: %s", [x.display_name for x in xs])

        logging.debug("Adding Argument to %s: %r", self.name, argument)
        self._arguments.append(argument)
        self._arguments.sort(key=lambda x: x.index)
        return self

    def add_arguments(self, *arguments:Argument) -> CLI:
        for arg in arguments:
            self.add_argument(arg)
        return self

    def remove_option(self, name:str) -> CLI:
        self._options = [x for x in self._options if not x.matches(name)]
        return self

    def remove_argument(self, index:int) -> CLI:
        self._arguments = [x for x in self._arguments if x.index != index]
        return self

    ##-- end builder

    ##-- access

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return tuple(self._arguments)

    @property
    def help_options(self) -> tuple[Option, ...]:
        return tuple(x for x in self._options if x.help)

    def get_option(self, name:str) -> None|Option:
        """ Get an option by its long or short name, with or without hyphens """
        for opt in self._options:
            if opt.matches(name):
                return opt
        else:
            return None

    def get_argument(self, index:int) -> None|Argument:
        for arg in self._arguments:
            if arg.index == index:
                return arg
        else:
            return None

    ##-- end access

    def parse(self, args:Sequence[str], *, validate:bool=True, parser:None|ArgParser_p=None) -> CommandLine:
        """ Parse a sequence of tokens (without the program name) against this definition """
        parser = parser or CLIParser()
        return parser.parse(self, args, validate=validate)

    def usage(self, buffer:Any=None, *, formatter:None|UsageFormatter_p=None) -> str:
        """ Generate the usage message, appending it to the buffer if given """
        formatter = formatter or UsageFormatter()
        text      = formatter.format(self)
        match buffer:
            case None:
                pass
            case list():
                buffer.append(text)
            case _ if hasattr(buffer, "write"):
                buffer.write(text)
            case _:
                raise TypeError("Usage can only be appended to lists or writeable buffers", buffer)

        return text

    def __repr__(self):
        return f"<CLI: {self.name}>"
