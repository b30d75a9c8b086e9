"""Argument parsing and option deduction for a file-listing tool: directory actions, file names, theme and version."""

__version__ = "0.1.0"