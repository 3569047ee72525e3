"""Model, validator and geometry logic for user-interface controls."""

__version__ = "0.22.7.38"