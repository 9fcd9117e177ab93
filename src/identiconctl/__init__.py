"""identiconctl — deterministic identicon generator."""

__version__ = "0.1.0"
