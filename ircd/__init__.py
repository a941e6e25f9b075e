"""ircd: IRC message grammar, registration commands and numeric replies."""

__version__ = "0.1.0"
