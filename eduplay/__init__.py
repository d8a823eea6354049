"""Educational games platform: JSON API, auth and progress tracking."""

__version__ = "1.0.0"
