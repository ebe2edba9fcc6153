"""HTTP API for the analytics screen."""
