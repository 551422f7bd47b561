"""Personal task tracker backed by a flat JSON document."""

__version__ = "0.1.0"
