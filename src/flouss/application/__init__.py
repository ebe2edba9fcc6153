"""Application layer - queries, services and ports."""
