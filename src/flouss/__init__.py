"""Flouss - personal finance analytics for Tunisian users."""

__version__ = "0.1.0"
