"""Small Unix tools: line reading, race laps, ELF headers, directory listings and signals."""

__version__ = "0.1.0"