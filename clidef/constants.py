##-- std imports
from __future__ import annotations

from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)
##-- end std imports

##-- token syntax
SHORT_PREFIX            : Final[str]              = "-"
LONG_PREFIX             : Final[str]              = "--"
END_OF_OPTIONS          : Final[str]              = "--"
PROPERTY_SEP            : Final[str]              = "="
##-- end token syntax

##-- usage
DEFAULT_VALUE_NAME      : Final[str]              = "value"
DEFAULT_ARG_PREFIX      : Final[str]              = "arg"
MULTI_SUFFIX            : Final[str]              = "..."
USAGE_PREFIX            : Final[str]              = "Usage: "
USAGE_WIDTH             : Final[int]              = 80
USAGE_INDENT            : Final[int]              = 1
USAGE_GAP               : Final[int]              = 3
##-- end usage

##-- loading
CLI_TABLE               : Final[str]              = "cli"
LOGGING_TABLE           : Final[str]              = "logging"
DEFINITION_SUFFIXES     : Final[tuple[str, ...]]  = (".toml", ".json")
##-- end loading

##-- printer
PRINTER_NAME            : Final[str]              = "_printer_"
##-- end printer
