"""Core engine: attributes, models and scouting logic."""
