"""Hubble Network satellite packet encoding and symbol transmission."""

__version__ = "0.1.0"