"""Degrees of separation over pairwise relationship records."""

__version__ = "0.1.0"
