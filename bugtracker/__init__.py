"""Bug tracker: bug reports kept as plain-text files, driven from an interactive menu."""

__version__ = "0.1.0"
