"""Italian verb conjugations with their German counterparts."""

__version__ = "0.1.0"
