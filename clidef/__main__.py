#!/usr/bin/env python3
"""
The clidef cli runner.
Parses tokens against a definition file, and reports the result:

    clidef copy.toml -- -R a.txt b.txt

"""
# Imports:
from __future__ import annotations

import json
import logging as logmod
import sys

from clidef import errors
from clidef._structs.argument import Argument
from clidef._structs.cli import CLI
from clidef._structs.option import Option
from clidef.constants import LOGGING_TABLE
from clidef.utils.loader import build_cli, load_data
from clidef.utils.log_config import LogConfig

##-- logging
logging         = logmod.root
##-- end logging

EXIT_OK      : int = 0
EXIT_INVALID : int = 1
EXIT_ERROR   : int = 2

RUNNER = (CLI.create("clidef")
          .set_summary("Parse a command line against a clidef definition file")
          .set_description("Loads the definition, parses the tokens given after '--', "
                           "and prints the resolved values as json, "
                           "or the definition's usage when help is asked for or the tokens are invalid.")
          .add_options(
              Option(short_name="v", long_name="verbose", flag=True, description="log at DEBUG level"),
              Option(long_name="log-level", arg_name="level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                     description="the level to log at"),
              Option(short_name="h", long_name="help", flag=True, help=True, description="print this message"),
          )
          .add_arguments(
              Argument(arg_name="definition", description="a .toml or .json definition file"),
              Argument(arg_name="tokens", multi_valued=True, required=False, description="the tokens to parse"),
          ))

def _report_invalid(printer:logmod.Logger, cli:CLI, found:errors.CLIDefError|list) -> None:
    match found:
        case list():
            for err in found:
                printer.error("%s %s", err.general_msg, err)
        case err:
            printer.error("%s %s", err.general_msg, err)

    printer.info("")
    printer.info(cli.usage().rstrip())

def main(argv:None|list[str]=None) -> int:
    log_config = LogConfig()
    printer    = log_config.printer()
    argv       = sys.argv[1:] if argv is None else argv

    try:
        runner = RUNNER.parse(argv)
    except errors.ParseError as err:
        _report_invalid(printer, RUNNER, err)
        return EXIT_ERROR

    if runner.is_asking_for_help():
        printer.info(RUNNER.usage().rstrip())
        return EXIT_OK
    if not runner.is_valid():
        _report_invalid(printer, RUNNER, runner.errors)
        return EXIT_ERROR

    try:
        data = load_data(runner.get_argument_value(0))
        log_config.setup(data._table().get(LOGGING_TABLE, None))
        match runner.get_option_value("log-level"):
            case None if runner.is_flag_enabled("verbose"):
                log_config.set_level("DEBUG")
            case None:
                pass
            case level:
                log_config.set_level(level)

        cli = build_cli(data)
    except errors.ConfigurationError as err:
        printer.error("%s %s", err.general_msg, err)
        return EXIT_ERROR

    tokens = runner.get_argument_values(1)
    logging.info("Parsing %s tokens against %s", len(tokens), cli.name)
    try:
        result = cli.parse(tokens)
    except errors.ParseError as err:
        _report_invalid(printer, cli, err)
        return EXIT_ERROR

    if result.is_asking_for_help():
        printer.info(cli.usage().rstrip())
        return EXIT_OK
    if not result.is_valid():
        _report_invalid(printer, cli, result.errors)
        return EXIT_INVALID

    printer.info(json.dumps(result.to_guard()._table(), indent=2))
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
