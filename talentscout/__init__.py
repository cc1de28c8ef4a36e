"""Scouting assessment and evidence engine."""

__version__ = "0.1.0"
