"""Solutions to classic algorithm and data-structure exercises."""

__version__ = "0.1.0"