#!/usr/bin/env python3
"""


"""
# Imports:
from __future__ import annotations

from typing import Final

__version__ : Final[str] = "0.1.0"
