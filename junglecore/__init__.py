"""Core runtime pieces for a small game engine: math, strings, names, delegates and objects."""

__version__ = "0.1.0"