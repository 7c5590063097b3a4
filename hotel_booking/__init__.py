"""Hotel room booking service for event participants."""

__version__ = "1.0.0"
