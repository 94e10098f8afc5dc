#!/usr/bin/env python3
"""
clidef : Declarative command line definitions.

Build a CLI of Options and Arguments, parse token sequences against it
into CommandLines, and render its usage message.

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from . import errors
from .structs import Argument, CLI, CommandLine, Option
from .parsers.parser import CLIParser
from .formatters.usage import UsageFormatter

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def parse(cli:CLI, args:list[str], *, validate:bool=True) -> CommandLine:
    """ Parse the tokens against the cli definition """
    return CLIParser().parse(cli, args, validate=validate)
