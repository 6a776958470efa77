"""Portfolio project publisher service."""

__version__ = "0.1.0"
