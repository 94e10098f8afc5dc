#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest
from clidef import errors
from clidef.structs import Option

class TestOption:

    def test_sanity(self):
        example = Option(long_name="test")
        assert(isinstance(example, Option))
        assert(example.key == "test")
        assert(not example.flag)
        assert(not example.required)

    def test_build_camel_case(self):
        example = Option.build({
            "longName"     : "color",
            "shortName"    : "c",
            "defaultValue" : "green",
            "multiValued"  : False,
            "choices"      : ["blue", "red", "green"],
            })
        assert(example.long_name == "color")
        assert(example.short_name == "c")
        assert(example.default_value == "green")
        assert(example.choices == ["blue", "red", "green"])

    def test_build_ignores_unknown_keys(self):
        example = Option.build({"longName": "test", "blah": "bloo"})
        assert(example.long_name == "test")
        assert(not hasattr(example, "blah"))

    def test_short_only_key(self):
        example = Option(short_name="v")
        assert(example.key == "v")
        assert(example.names == ("v",))

    def test_hyphens_stripped(self):
        example = Option(long_name="--directory", short_name="-R")
        assert(example.long_name == "directory")
        assert(example.short_name == "R")
        assert(str(example) == "-R, --directory")

    def test_needs_a_name(self):
        with pytest.raises(errors.ConfigurationError):
            Option(description="nameless")

    def test_build_needs_a_name(self):
        with pytest.raises(errors.ConfigurationError):
            Option.build({"description": "nameless"})

    def test_short_name_single_char(self):
        with pytest.raises(errors.ConfigurationError):
            Option(short_name="ab")

    def test_short_name_invalid_char(self):
        with pytest.raises(errors.ConfigurationError):
            Option(short_name="=")

    def test_flag_not_multi(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="test", flag=True, multi_valued=True)

    def test_flag_no_default(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="test", flag=True, default_value="blah")

    def test_properties_need_short_name(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="props", properties=True)

    def test_default_in_choices(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="color", default_value="purple", choices=["red", "blue"])

    def test_bad_field_type_wrapped(self):
        with pytest.raises(errors.ConfigurationError):
            Option.build({"longName": "test", "flag": "not a bool"})

    def test_choices_set_sorted(self):
        example = Option(long_name="color", choices={"red", "blue", "green"})
        assert(example.choices == ["blue", "green", "red"])

    def test_default_coerced_to_str(self):
        example = Option.build({"longName": "count", "defaultValue": 3})
        assert(example.default_value == "3")

    def test_type_conversion(self):
        example = Option.build({"longName": "count", "type": "int"})
        assert(example.convert("3") == 3)

    def test_type_conversion_fail(self):
        example = Option.build({"longName": "count", "type": "int"})
        with pytest.raises(errors.InvalidValueError):
            example.convert("blah")

    def test_bool_type(self):
        example = Option(long_name="switch", type=bool)
        assert(example.convert("yes") is True)
        assert(example.convert("off") is False)

    def test_path_type(self):
        example = Option.build({"longName": "file", "type": "path"})
        assert(example.convert("a/b") == pl.Path("a/b"))

    def test_unknown_type_name(self):
        with pytest.raises(errors.ConfigurationError):
            Option.build({"longName": "test", "type": "blah"})

    def test_unknown_type_name_by_keyword(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="test", type="bogus")

    def test_non_callable_type(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="test", type=5)

    def test_bad_field_by_keyword(self):
        with pytest.raises(errors.ConfigurationError):
            Option(long_name="test", flag="not a bool")

    def test_matches(self):
        example = Option(long_name="color", short_name="c")
        assert(example.matches("color"))
        assert(example.matches("--color"))
        assert(example.matches("-color"))
        assert(example.matches("c"))
        assert(example.matches("-c"))
        assert(not example.matches("--c"))
        assert(not example.matches("colour"))

    def test_accepts_more_values(self):
        assert(Option(long_name="a", multi_valued=True).accepts_more_values)
        assert(Option(short_name="D", properties=True).accepts_more_values)
        assert(not Option(long_name="a").accepts_more_values)
        assert(not Option(long_name="a", flag=True).accepts_value)

    def test_verify_is_repeatable(self):
        example = Option(long_name="test")
        example.verify()
        assert(example.key == "test")
