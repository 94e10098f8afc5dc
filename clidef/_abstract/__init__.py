"""

"""
from .protocols import (ArgParser_p, Buildable_p, ParamStruct_p,
                        ProtocolModelMeta, UsageFormatter_p)
