#!/usr/bin/env python3
"""
Logging setup for the clidef runner.

Two loggers are managed:
- root         : the general log trace, WARNING to stdout by default.
- _printer_    : replaces 'print', for usage messages and parse results.

Both can be reconfigured from a [logging] table:

    [logging.stream]
    level = "DEBUG"
    target = "stderr"

    [logging.printer]
    format = "{message}"

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
from clidef.constants import PRINTER_NAME
from clidef._structs.logger_spec import LoggerSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class LogConfig:
    """ Utility class to setup stream and printer logging.
      Instead of using `print`, the runner notifies the user using the printer,
      which keeps its output separate from the general log trace.
    """

    def __init__(self):
        self.stream_spec  = LoggerSpec.build({"name"   : LoggerSpec.RootName,
                                              "level"  : "WARNING",
                                              "target" : "stderr",
                                              "format" : "{levelname:<8} : {message}",
                                              })
        self.printer_spec = LoggerSpec.build({"name"      : PRINTER_NAME,
                                              "level"     : "INFO",
                                              "target"    : "stdout",
                                              "format"    : "{message}",
                                              "propagate" : False,
                                              })
        self.stream_spec.apply()
        self.printer_spec.apply()
        logging.debug("Post Log Setup")

    def setup(self, config:None|TomlGuard|dict=None) -> None:
        """ Re-apply the stream and printer specs, updated by a [logging] table """
        match config:
            case None:
                return
            case TomlGuard():
                config = config._table()
            case dict():
                pass

        stream_data  = config.get("stream", {})
        printer_data = config.get("printer", {})
        if bool(stream_data):
            self.stream_spec = LoggerSpec.build(stream_data, name=LoggerSpec.RootName)
            self.stream_spec.apply()
        if bool(printer_data):
            self.printer_spec = LoggerSpec.build(printer_data, name=PRINTER_NAME)
            self.printer_spec.apply()

    def set_level(self, level:int|str) -> None:
        self.stream_spec.set_level(level)

    @staticmethod
    def printer() -> logmod.Logger:
        return logmod.getLogger(PRINTER_NAME)
