#!/usr/bin/env python3
"""
Render the usage message of a CLI definition.

    Usage: copy [-R] <source> <target>

    Copy a file

    Options:
     -R, --directory   enables directory support

    Arguments:
     <source>          the source
     <target>          the target

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import itertools as itz
import logging as logmod
import textwrap
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 1st party imports
from clidef.constants import (MULTI_SUFFIX, PROPERTY_SEP, USAGE_GAP,
                              USAGE_INDENT, USAGE_PREFIX, USAGE_WIDTH)

# ##-- end 1st party imports

if TYPE_CHECKING:
    from clidef._structs.argument import Argument
    from clidef._structs.cli import CLI
    from clidef._structs.option import Option

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

OPTIONS_HEADER   : Final[str] = "Options:"
ARGUMENTS_HEADER : Final[str] = "Arguments:"

class UsageFormatter:
    """
      Formats a CLI into a deterministic usage message.
      The output depends only on the CLI definition and the formatter settings.
      Hidden options and arguments are left out.
    """

    def __init__(self, *, width:int=USAGE_WIDTH, indent:int=USAGE_INDENT, gap:int=USAGE_GAP):
        self.width  = width
        self.indent = indent
        self.gap    = gap

    def format(self, cli:CLI) -> str:
        options   = [x for x in cli.options if not x.hidden]
        arguments = [x for x in cli.arguments if not x.hidden]
        lines     = [*self._synopsis(cli, options, arguments)]

        for para in [cli.summary, cli.description]:
            if not bool(para):
                continue
            lines.append("")
            lines += textwrap.wrap(para, width=self.width) or [""]

        rows = [(self._option_cell(x), self._option_desc(x)) for x in options]
        rows += [(self._argument_cell(x), self._argument_desc(x)) for x in arguments]
        col  = max((len(x) for x, _ in rows), default=0)

        if bool(options):
            lines.append("")
            lines.append(OPTIONS_HEADER)
            lines += self._table(rows[:len(options)], col)

        if bool(arguments):
            lines.append("")
            lines.append(ARGUMENTS_HEADER)
            lines += self._table(rows[len(options):], col)

        return "\n".join(lines) + "\n"

    ##-- synopsis

    def _synopsis(self, cli:CLI, options:list[Option], arguments:list[Argument]) -> list[str]:
        head   = f"{USAGE_PREFIX}{cli.name}"
        parts  = [self._option_synopsis(x) for x in options]
        parts += [self._argument_synopsis(x) for x in arguments]
        return textwrap.wrap(" ".join([head, *parts]),
                             width=self.width,
                             subsequent_indent=" " * (len(head) + 1),
                             break_on_hyphens=False,
                             break_long_words=False)

    def _option_synopsis(self, option:Option) -> str:
        name = option.short_str or option.long_str
        match option:
            case x if x.properties:
                body = f"{name}<key>{PROPERTY_SEP}<{x.arg_name}>"
            case x if x.flag:
                body = name
            case x:
                body = f"{name} <{x.arg_name}>"

        if option.required:
            return body
        return f"[{body}]"

    def _argument_synopsis(self, argument:Argument) -> str:
        body = f"<{argument.display_name}>"
        if argument.multi_valued:
            body += MULTI_SUFFIX
        if argument.required:
            return body
        return f"[{body}]"

    ##-- end synopsis

    ##-- table

    def _option_cell(self, option:Option) -> str:
        names = ", ".join(x for x in [option.short_str, option.long_str] if x)
        match option:
            case x if x.properties:
                return f"{x.short_str}<key>{PROPERTY_SEP}<{x.arg_name}>"
            case x if x.flag:
                return names
            case x:
                return f"{names} <{x.arg_name}>"

    def _option_desc(self, option:Option) -> str:
        parts = [option.description] if option.description else []
        if option.required:
            parts.append("(required)")
        if option.default_value is not None:
            parts.append(f"(default: {option.default_value})")
        if option.choices:
            parts.append(f"(choices: {', '.join(option.choices)})")
        return " ".join(parts)

    def _argument_cell(self, argument:Argument) -> str:
        return str(argument) + (MULTI_SUFFIX if argument.multi_valued else "")

    def _argument_desc(self, argument:Argument) -> str:
        parts = [argument.description] if argument.description else []
        if argument.default_value is not None:
            parts.append(f"(default: {argument.default_value})")
        return " ".join(parts)

    def _table(self, rows:list[tuple[str, str]], col:int) -> list[str]:
        """ Two aligned columns, descriptions wrapped to the width """
        lines      = []
        lead       = " " * self.indent
        desc_start = self.indent + col + self.gap
        desc_width = max(self.width - desc_start, 20)
        for cell, desc in rows:
            wrapped = textwrap.wrap(desc, width=desc_width) or [""]
            first   = f"{lead}{cell:<{col}}{' ' * self.gap}{wrapped[0]}"
            lines.append(first.rstrip())
            lines += [(" " * desc_start) + x for x in wrapped[1:]]
        else:
            return lines

    ##-- end table
