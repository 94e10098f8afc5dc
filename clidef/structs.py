#!/usr/bin/env python3
"""
Public Access point for clidef Structures
"""
from __future__ import annotations

from clidef._structs.option import Option
from clidef._structs.argument import Argument
from clidef._structs.command_line import CommandLine
from clidef._structs.cli import CLI
from clidef._structs.logger_spec import LoggerSpec
