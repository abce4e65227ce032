"""msh - a small interactive command interpreter."""

__version__ = "0.1.0"
