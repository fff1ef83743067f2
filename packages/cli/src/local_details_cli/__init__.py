"""Local Details CLI - interactive form for publication details documents."""

__version__ = "0.1.0"
