"""Personal task journal kept as a JSON file."""

__version__ = "0.1.0"
