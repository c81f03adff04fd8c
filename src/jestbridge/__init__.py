"""jestbridge - Jest test discovery, command building and result reconciliation."""

__version__ = "0.1.0"
