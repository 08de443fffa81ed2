"""Smart git log, everyday git operations and a command line to run them."""

__version__ = "0.1.0"