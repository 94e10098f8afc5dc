#!/usr/bin/env python3
"""
These are the clidef specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
from ._base import CLIDefError, ParamError
from .access import UnknownKeyError
from .config import ConfigurationError
from .parse import (FlagValueError, InvalidCommandLineError,
                    MissingValueError, ParseError, UnknownOptionError)
from .validation import (InvalidValueError, MissingArgumentError,
                         MissingOptionError, TooManyValuesError,
                         ValidationError)

# ##-- end 1st party imports
