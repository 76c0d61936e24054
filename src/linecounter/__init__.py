"""Desktop utility that counts the lines of a text file."""

__version__ = "1.0.0"
