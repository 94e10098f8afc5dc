#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest
from clidef import errors
from clidef.parsers.parser import CLIParser
from clidef.structs import CLI, Argument, CommandLine, Option

@pytest.fixture
def copy_cli():
    return (CLI.create("copy")
            .add_option(Option(long_name="directory", short_name="R", flag=True))
            .add_arguments(Argument(arg_name="source"), Argument(arg_name="target")))

@pytest.fixture
def cli():
    return (CLI.create("test")
            .add_options(Option(long_name="verbose", short_name="v", flag=True),
                         Option(long_name="output", short_name="o"),
                         Option(long_name="include", short_name="I", multi_valued=True),
                         Option(short_name="O"),
                         Option(short_name="D", properties=True))
            .add_arguments(Argument(arg_name="files", multi_valued=True, required=False)))

class TestArgParser:

    def test_initial(self, cli):
        parser = CLIParser()
        result = parser.parse(cli, [])
        assert(isinstance(result, CommandLine))
        assert(result.is_valid())

    def test_copy_example(self, copy_cli):
        result = copy_cli.parse(["-R", "a.txt", "b.txt"])
        assert(result.is_valid())
        assert(result.is_flag_enabled("directory"))
        assert(result.get_argument_value(0) == "a.txt")
        assert(result.get_argument_value(1) == "b.txt")

    def test_flag_not_given(self, copy_cli):
        result = copy_cli.parse(["a.txt", "b.txt"])
        assert(not result.is_flag_enabled("directory"))

    def test_string_args_rejected(self, copy_cli):
        with pytest.raises(TypeError):
            copy_cli.parse("-R a b")

    def test_tuple_args(self, copy_cli):
        result = copy_cli.parse(("-R", "a", "b"))
        assert(result.is_flag_enabled("R"))

    def test_idempotent(self, cli):
        args = ["-v", "-I", "a", "--output=x", "-Dk=v", "f1", "f2"]
        assert(cli.parse(args) == cli.parse(args))

    def test_parser_reuse(self, cli):
        parser = CLIParser()
        first  = parser.parse(cli, ["-v"])
        second = parser.parse(cli, ["f1"])
        assert(first.is_flag_enabled("v"))
        assert(not second.is_flag_enabled("v"))
        assert(second.get_argument_values(0) == ["f1"])

class TestLongOptions:

    def test_long_flag(self, cli):
        result = cli.parse(["--verbose"])
        assert(result.is_flag_enabled("verbose"))
        assert(result.get_option_values("verbose") == [])

    def test_assign_and_separate_match(self, cli):
        joined   = cli.parse(["--output=x"])
        separate = cli.parse(["--output", "x"])
        assert(joined.get_option_value("output") == "x")
        assert(separate.get_option_value("output") == joined.get_option_value("output"))

    def test_assign_empty(self, cli):
        result = cli.parse(["--output="])
        assert(result.get_option_value("output") == "")

    def test_assign_keeps_later_equals(self, cli):
        result = cli.parse(["--output=a=b"])
        assert(result.get_option_value("output") == "a=b")

    def test_flag_with_value_fails(self, cli):
        with pytest.raises(errors.FlagValueError):
            cli.parse(["--verbose=true"])

    def test_flag_with_value_is_configuration_error(self, cli):
        with pytest.raises(errors.ConfigurationError):
            cli.parse(["--verbose=true"])

    def test_missing_value_at_end(self, cli):
        with pytest.raises(errors.MissingValueError) as ctx:
            cli.parse(["--output"])

        assert(ctx.value.param == "output")

    def test_missing_value_before_option(self, cli):
        with pytest.raises(errors.MissingValueError):
            cli.parse(["--output", "-v"])

    def test_missing_value_before_separator(self, cli):
        with pytest.raises(errors.MissingValueError):
            cli.parse(["--output", "--"])

    def test_missing_value_before_undeclared_long(self, cli):
        with pytest.raises(errors.MissingValueError) as ctx:
            cli.parse(["--output", "--nope"])

        assert(ctx.value.param == "output")

    def test_undeclared_long_not_taken_as_value(self, cli):
        result = cli.parse(["--output", "--nope", "a"], validate=False)
        assert(result.get_option_value("output") is None)
        assert(result.unparsed == ["--nope"])
        assert(result.get_argument_values(0) == ["a"])

    def test_undeclared_dash_value_accepted(self, cli):
        result = cli.parse(["--output", "-5"])
        assert(result.get_option_value("output") == "-5")

    def test_lone_dash_value_accepted(self, cli):
        result = cli.parse(["--output", "-"])
        assert(result.get_option_value("output") == "-")

    def test_multi_valued_order(self, cli):
        result = cli.parse(["--include", "c", "-I", "a", "--include=b"])
        assert(result.get_option_values("include") == ["c", "a", "b"])

    def test_single_valued_last_wins(self, cli):
        result = cli.parse(["--output", "a", "-o", "b"])
        assert(result.get_option_values("output") == ["b"])
        assert(result.is_valid())

    def test_unknown_long(self, cli):
        with pytest.raises(errors.UnknownOptionError) as ctx:
            cli.parse(["--blah"])

        assert(ctx.value.param == "blah")

    def test_unknown_long_permissive(self, cli):
        cli.set_permissive()
        result = cli.parse(["--blah=bloo", "-v"])
        assert(result.unparsed == ["--blah=bloo"])
        assert(result.is_flag_enabled("v"))

    def test_single_hyphen_long(self, cli):
        result = cli.parse(["-verbose", "-output=x", "-include", "y"])
        assert(result.is_flag_enabled("verbose"))
        assert(result.get_option_value("output") == "x")
        assert(result.get_option_values("include") == ["y"])

class TestSeparator:

    def test_separator_makes_positional(self, cli):
        result = cli.parse(["-v", "--", "-v", "--output", "x", "--"])
        assert(result.is_flag_enabled("verbose"))
        assert(result.get_option_value("output") is None)
        assert(result.get_argument_values(0) == ["-v", "--output", "x", "--"])

    def test_separator_not_recorded(self, cli):
        result = cli.parse(["--"])
        assert(result.all_arguments == [])

    def test_extra_positionals(self, copy_cli):
        result = copy_cli.parse(["a", "b", "c", "d"])
        assert(result.is_valid())
        assert(result.extra_arguments == ["c", "d"])
        assert(result.all_arguments == ["a", "b", "c", "d"])

    def test_lone_dash_positional(self, copy_cli):
        result = copy_cli.parse(["-", "b"])
        assert(result.get_argument_value(0) == "-")

    def test_positionals_between_options(self, copy_cli):
        result = copy_cli.parse(["a", "-R", "b"])
        assert(result.is_flag_enabled("R"))
        assert(result.get_argument_value(1) == "b")

class TestProperties:

    def test_property(self, cli):
        result = cli.parse(["-Dkey=value"])
        assert(result.get_raw_values("D") == ["key=value"])
        assert(result.get_properties("D") == {"key": "value"})

    def test_properties_accumulate(self, cli):
        result = cli.parse(["-Da=1", "-v", "-Db=2"])
        assert(result.get_properties("D") == {"a": "1", "b": "2"})

    def test_property_separate_token(self, cli):
        result = cli.parse(["-D", "a=1"])
        assert(result.get_properties("D") == {"a": "1"})

    def test_property_later_wins_in_dict(self, cli):
        result = cli.parse(["-Da=1", "-Da=2"])
        assert(result.get_raw_values("D") == ["a=1", "a=2"])
        assert(result.get_properties("D") == {"a": "2"})

    def test_property_leading_separator(self, cli):
        result = cli.parse(["-D=a=1"])
        assert(result.get_raw_values("D") == ["a=1"])
        assert(result.get_properties("D") == {"a": "1"})

class TestNoValidate:

    def test_unknown_kept(self, cli):
        result = cli.parse(["--blah", "-x"], validate=False)
        assert(result.unparsed == ["--blah", "-x"])
        assert(result.is_valid())

    def test_missing_value_ignored(self, cli):
        result = cli.parse(["--output"], validate=False)
        assert(result.get_option_value("output") is None)
        assert(result.is_flag_enabled("output"))

    def test_flag_value_still_fails(self, cli):
        with pytest.raises(errors.FlagValueError):
            cli.parse(["--verbose=x"], validate=False)
