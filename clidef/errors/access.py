#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ParamError

class UnknownKeyError(ParamError, KeyError):
    """ A CommandLine was queried for an option or argument its CLI never declared """
    general_msg = "Undeclared Parameter:"

    def __str__(self):
        return ParamError.__str__(self)
