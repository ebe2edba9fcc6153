"""Domain layer of flouss."""
