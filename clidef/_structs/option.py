#!/usr/bin/env python3
"""
The declared, named, parameters of a CLI.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import pathlib as pl
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
from clidef.constants import (LONG_PREFIX, PROPERTY_SEP, SHORT_PREFIX,
                              DEFAULT_VALUE_NAME)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _str_to_bool(val:str) -> bool:
    match val.lower():
        case "true" | "yes" | "on" | "1":
            return True
        case "false" | "no" | "off" | "0":
            return False
        case _:
            raise ValueError("Not a boolean value", val)

def validate_type(val:Any) -> Callable:
    """ Map a type name from a definition file onto a converter """
    match val:
        case None | "str":
            return str
        case "int":
            return int
        case "float":
            return float
        case "bool":
            return _str_to_bool
        case "path":
            return pl.Path
        case type() if val is bool:
            return _str_to_bool
        case str():
            raise errors.ConfigurationError("Unknown parameter type: %s", val)
        case _ if callable(val):
            return val
        case _:
            raise errors.ConfigurationError("Parameter types must be a name or a callable: %s", val)

def convert_value(param:Any, converter:Callable, raw:str) -> Any:
    """ Apply a converter, turning failures into InvalidValueError """
    try:
        return converter(raw)
    except (ValueError, TypeError) as err:
        raise errors.InvalidValueError("Value '%s' is not valid for %s", raw, param, param=param.key) from err

def normalise_choices(val:Any) -> None|list[str]:
    match val:
        case None:
            return None
        case set() | frozenset():
            return sorted(str(x) for x in val)
        case str():
            return [val]
        case [*xs]:
            return [str(x) for x in xs]
        case _:
            return val

def normalise_default(val:Any) -> None|str:
    match val:
        case None | str():
            return val
        case bool():
            return str(val).lower()
        case int() | float() | pl.Path():
            return str(val)
        case _:
            return val

class Option(BaseModel, ParamStruct_p, Buildable_p, metaclass=ProtocolModelMeta, frozen=True, populate_by_name=True, extra="ignore", arbitrary_types_allowed=True):
    """ Describes a named command line parameter, matched by the parser
      by its long name (--name, -name) or its short name (-n).

      A flag takes no values,
      a multi_valued option collects one value per occurrence,
      otherwise the option holds a single value, the last one given.
      A properties option collects -Dkey=value pairs.
    """

    long_name     : None|str                    = Field(default=None, alias="longName")
    short_name    : None|str                    = Field(default=None, alias="shortName")
    description   : str                         = ""
    flag          : bool                        = False
    multi_valued  : bool                        = Field(default=False, alias="multiValued")
    required      : bool                        = False
    default_value : None|str                    = Field(default=None, alias="defaultValue")
    hidden        : bool                        = False
    help          : bool                        = False
    choices       : None|list[str]              = None
    arg_name      : str                         = Field(default=DEFAULT_VALUE_NAME, alias="argName")
    properties    : bool                        = False
    type_         : InstanceOf[type]|Callable   = Field(default=str, alias="type")

    @classmethod
    def build(cls, data:TomlGuard|dict) -> Option:
        """ Build an option from a json/toml style mapping """
        match data:
            case TomlGuard():
                data = dict(data._table())
            case dict():
                pass
            case _:
                raise errors.ConfigurationError("Options are built from mappings", data)

        return cls.model_validate(data)

    @model_validator(mode="wrap")
    @classmethod
    def _wrap_validation_errors(cls, data:Any, handler:Callable) -> Option:
        """ Bad definitions raise ConfigurationError however they are built """
        try:
            return handler(data)
        except ValidationError as err:
            raise errors.ConfigurationError("Bad Option Definition: %s : %s", data, err) from err

    @field_validator("long_name", mode="before")
    def _validate_long_name(cls, val):
        match val:
            case str():
                return val.lstrip(SHORT_PREFIX) or None
            case _:
                return val

    @field_validator("short_name", mode="before")
    def _validate_short_name(cls, val):
        match val:
            case str() if val.startswith(SHORT_PREFIX) and len(val) > 1:
                return val.removeprefix(SHORT_PREFIX)
            case "":
                return None
            case _:
                return val

    @field_validator("default_value", mode="before")
    def _validate_default(cls, val):
        return normalise_default(val)

    @field_validator("choices", mode="before")
    def _validate_choices(cls, val):
        return normalise_choices(val)

    @field_validator("type_", mode="before")
    def _validate_type(cls, val):
        return validate_type(val)

    @model_validator(mode="after")
    def _check_definition(self):
        self.verify()
        return self

    def verify(self) -> None:
        """ Check the combination of fields makes sense,
        raising a ConfigurationError when it doesn't
        """
        if not (self.long_name or self.short_name):
            raise errors.ConfigurationError("An Option needs a long name or a short name", self.description)

        match self.short_name:
            case None:
                pass
            case str() as x if len(x) != 1:
                raise errors.ConfigurationError("Short names are a single character: %s", x)
            case "-" | "=" | " ":
                raise errors.ConfigurationError("Invalid short name: '%s'", self.short_name)

        if self.long_name and any(x.isspace() or x == PROPERTY_SEP for x in self.long_name):
            raise errors.ConfigurationError("Invalid long name: '%s'", self.long_name)

        if self.flag and self.multi_valued:
            raise errors.ConfigurationError("A flag can't be multi valued: %s", self.key)
        if self.flag and self.default_value is not None:
            raise errors.ConfigurationError("A flag can't have a default value: %s", self.key)
        if self.flag and self.choices:
            raise errors.ConfigurationError("A flag can't have choices: %s", self.key)
        if self.flag and self.properties:
            raise errors.ConfigurationError("A flag can't collect properties: %s", self.key)
        if self.properties and self.short_name is None:
            raise errors.ConfigurationError("A properties option needs a short name to use as -<x>key=value: %s", self.key)
        if self.choices is not None and self.default_value is not None and self.default_value not in self.choices:
            raise errors.ConfigurationError("Default value of %s is not one of its choices: %s", self.key, self.default_value)

    @property
    def key(self) -> str:
        """ The canonical name, used to store values """
        return self.long_name or self.short_name

    @ftz.cached_property
    def names(self) -> tuple[str, ...]:
        return tuple(x for x in [self.long_name, self.short_name] if x is not None)

    @ftz.cached_property
    def accepts_value(self) -> bool:
        return not self.flag

    @ftz.cached_property
    def accepts_more_values(self) -> bool:
        return self.multi_valued or self.properties

    @ftz.cached_property
    def short_str(self) -> str:
        if self.short_name is None:
            return ""
        return f"{SHORT_PREFIX}{self.short_name}"

    @ftz.cached_property
    def long_str(self) -> str:
        if self.long_name is None:
            return ""
        return f"{LONG_PREFIX}{self.long_name}"

    def matches(self, name:str) -> bool:
        """ Test a name, with or without hyphens, against this option """
        match name:
            case str() if name.startswith(LONG_PREFIX):
                return name.removeprefix(LONG_PREFIX) == self.long_name
            case str() if name.startswith(SHORT_PREFIX):
                return name.removeprefix(SHORT_PREFIX) in self.names
            case str():
                return name in self.names
            case _:
                return False

    def convert(self, raw:str) -> Any:
        return convert_value(self, self.type_, raw)

    def __str__(self):
        return ", ".join(x for x in [self.short_str, self.long_str] if x)

    def __repr__(self):
        return f"<Option: {self}>"
