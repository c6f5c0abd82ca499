"""Manage configuration profiles stored as YAML files, from Python or the command line."""

__version__ = "0.1.0"