"""Typed display variables, XML display-spec helpers and primitive geometry."""

__version__ = "0.1.0"