"""jestbridge CLI."""
