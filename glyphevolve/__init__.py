"""Evolve anti-aliased line drawings that approximate font glyphs with a genetic algorithm."""

__version__ = "0.1.0"