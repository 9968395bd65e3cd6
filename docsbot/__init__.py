"""docsbot - documentation discovery tools for agents."""

__version__ = "0.1.0"
