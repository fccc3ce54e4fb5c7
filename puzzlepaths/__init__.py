"""Boggle word finding and grid maze path solving."""

__version__ = "0.1.0"