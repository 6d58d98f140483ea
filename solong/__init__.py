"""A tile-based maze game with its map reader, text helpers and renderer."""

__version__ = "0.1.0"