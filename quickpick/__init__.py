"""Item matching and input editing for a dynamic menu, and a file-testing filter."""

__version__ = "5.3.0"