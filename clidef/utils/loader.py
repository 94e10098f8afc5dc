#!/usr/bin/env python3
"""
Load CLI definitions from toml or json files.

A definition file holds a [cli] table (or is the table itself):

    [cli]
    name        = "copy"
    summary     = "Copy a file"

    [[cli.options]]
    longName    = "directory"
    shortName   = "R"
    flag        = true

    [[cli.arguments]]
    argName     = "source"

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import json
import logging as logmod
import pathlib as pl
import tomllib
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
from clidef._structs.cli import CLI
from clidef.constants import CLI_TABLE, DEFINITION_SUFFIXES

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def load_data(path:str|pl.Path) -> TomlGuard:
    """ Read a toml or json definition file into a TomlGuard """
    path = pl.Path(path).expanduser()
    logging.info("Loading definition file: %s", path)
    if path.suffix not in DEFINITION_SUFFIXES:
        raise errors.ConfigurationError("Definition files are one of %s: %s", DEFINITION_SUFFIXES, path)
    if not path.is_file():
        raise errors.ConfigurationError("Definition file not found: %s", path)

    try:
        match path.suffix:
            case ".toml":
                with path.open("rb") as f:
                    data = tomllib.load(f)
            case ".json":
                with path.open("r") as f:
                    data = json.load(f)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as err:
        raise errors.ConfigurationError("Failed to read definition file %s: %s", path, err) from err

    if not isinstance(data, dict):
        raise errors.ConfigurationError("Definition files contain a table: %s", path)

    return TomlGuard(data)

def build_cli(data:TomlGuard|dict) -> CLI:
    """ Build the CLI from loaded definition data """
    if isinstance(data, TomlGuard):
        data = data._table()

    match data.get(CLI_TABLE, None):
        case dict() as table:
            return CLI.build(table)
        case None:
            return CLI.build(data)
        case x:
            raise errors.ConfigurationError("The [%s] entry of the definition isn't a table: %s", CLI_TABLE, x)

def load_cli(path:str|pl.Path) -> CLI:
    """ Build the CLI defined in a file """
    return build_cli(load_data(path))
