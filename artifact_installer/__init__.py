"""Install a file into a local Maven repository unless it already exists."""

__version__ = "1.0.0"
