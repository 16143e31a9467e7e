"""Sliding puzzle engine: board model, generator, move engine and session."""
