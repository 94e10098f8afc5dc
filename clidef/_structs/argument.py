#!/usr/bin/env python3
"""

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import (BaseModel, Field, InstanceOf, ValidationError,
                      field_validator, model_validator)
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clidef import errors
from clidef._abstract.protocols import (Buildable_p, ParamStruct_p,
                                        ProtocolModelMeta)
from clidef._structs.option import (convert_value, normalise_default,
                                    validate_type)
from clidef.constants import DEFAULT_ARG_PREFIX

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Argument(BaseModel, ParamStruct_p, Buildable_p, metaclass=ProtocolModelMeta, frozen=True, populate_by_name=True, extra="ignore", arbitrary_types_allowed=True):
    """ Describes a positional command line parameter, identified by its index.
      An index of None is assigned by the CLI it is added to.
    """

    index         : None|int                    = None
    arg_name      : None|str                    = Field(default=None, alias="argName")
    description   : str                         = ""
    required      : bool                        = True
    default_value : None|str                    = Field(default=None, alias="defaultValue")
    multi_valued  : bool                        = Field(default=False, alias="multiValued")
    hidden        : bool                        = False
    type_         : InstanceOf[type]|Callable   = Field(default=str, alias="type")

    @classmethod
    def build(cls, data:TomlGuard|dict) -> Argument:
        match data:
            case TomlGuard():
                data = dict(data._table())
            case dict():
                pass
            case _:
                raise errors.ConfigurationError("Arguments are built from mappings", data)

        return cls.model_validate(data)

    @model_validator(mode="wrap")
    @classmethod
    def _wrap_validation_errors(cls, data:Any, handler:Callable) -> Argument:
        try:
            return handler(data)
        except ValidationError as err:
            raise errors.ConfigurationError("Bad Argument Definition: %s : %s", data, err) from err

    @field_validator("default_value", mode="before")
    def _validate_default(cls, val):
        return normalise_default(val)

    @field_validator("type_", mode="before")
    def _validate_type(cls, val):
        return validate_type(val)

    @model_validator(mode="after")
    def _check_definition(self):
        self.verify()
        return self

    def verify(self) -> None:
        match self.index:
            case None:
                pass
            case int() as x if x < 0:
                raise errors.ConfigurationError("Argument indices can't be negative: %s", x)
            case _:
                pass

    @property
    def key(self) -> int:
        return self.index

    @property
    def display_name(self) -> str:
        return self.arg_name or f"{DEFAULT_ARG_PREFIX}{self.index}"

    def convert(self, raw:str) -> Any:
        return convert_value(self, self.type_, raw)

    def __str__(self):
        return f"<{self.display_name}>"

    def __repr__(self):
        return f"<Argument: {self.index} : {self.display_name}>"
