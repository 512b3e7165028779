# -*- coding: utf-8 -*-
"""
The 'shellbox' package is a collection of small, independent command-line
utilities that used to live in a shell profile script.

Each subpackage wraps one concern: URL decomposition, process termination,
countdown timing, calendar printing and phonetic spelling. Nothing here
keeps state between calls.
"""

__version__ = "1.0.0"
